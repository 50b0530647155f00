from shamir_recovery.cli import app

app(prog_name="shamir-recovery")
