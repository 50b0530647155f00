import asyncio
import logging
from pathlib import Path
from typing import Iterable

from shamir_recovery.common.constants import LOG_FORMAT
from shamir_recovery.common.errors import CaseProcessingFailed, RecoveryError
from shamir_recovery.common.types import Case, CaseResult
from shamir_recovery.crypto.decoder import decode_shares
from shamir_recovery.crypto.lagrange import SelectionPolicy, recover, select_first_k
from shamir_recovery.driver.loader import load_case

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


class CaseRunner:
    def __init__(self, select: SelectionPolicy = select_first_k):
        self._logger = logging.getLogger(__class__.__name__)
        self._select = select

    def process_case(self, case: Case) -> int:
        """
        Decodes the shares of a case and recovers its secret.

        Args:
            case (Case): The parsed case.

        Returns:
            int: The recovered secret.

        Raises:
            CaseProcessingFailed: If a share is malformed or the points cannot
                be interpolated. The original error is kept as the cause.
        """
        if case.keys.n != len(case.shares):
            self._logger.warning(
                f"{case.case_id}: declares n={case.keys.n} "
                f"but supplies {len(case.shares)} shares"
            )
        try:
            points = decode_shares(case.shares)
            return recover(points, case.keys.k, select=self._select)
        except RecoveryError as e:
            raise CaseProcessingFailed(case.case_id, e) from e

    def run_file(self, path: Path) -> CaseResult:
        path = Path(path)
        try:
            case = load_case(path)
            secret = self.process_case(case)
        except CaseProcessingFailed as e:
            self._logger.error(str(e))
            return CaseResult(case_id=e.case_id, error=str(e.cause))
        except (RecoveryError, OSError) as e:
            failure = CaseProcessingFailed(path.name, e)
            self._logger.error(str(failure))
            return CaseResult(case_id=path.name, error=str(e))
        self._logger.info(f"{case.case_id}: recovered secret")
        return CaseResult(case_id=case.case_id, secret=secret)

    async def run_all(self, paths: Iterable[Path]) -> list[CaseResult]:
        """
        Processes every case file concurrently. A failing case is reported in
        its own result and does not affect the others.
        """
        paths = list(paths)
        self._logger.info(f"Processing {len(paths)} cases")
        return list(
            await asyncio.gather(
                *(asyncio.to_thread(self.run_file, path) for path in paths)
            )
        )
