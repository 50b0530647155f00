from shamir_recovery.common.types import CaseResult


def format_result(result: CaseResult) -> str:
    if result.ok:
        return f"{result.case_id}: Secret = {result.secret}"
    return f"{result.case_id}: Error = {result.error}"


def format_results(results: list[CaseResult]) -> str:
    lines = ["", "Results:", "--------"]
    lines.extend(format_result(result) for result in results)
    return "\n".join(lines)


def as_mapping(results: list[CaseResult]) -> dict[str, int | str]:
    """Maps each case id to its secret, or to the error message of a failed case."""
    return {
        result.case_id: result.secret if result.ok else result.error
        for result in results
    }
