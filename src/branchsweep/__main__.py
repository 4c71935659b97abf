from branchsweep.cli import app

app(prog_name="branchsweep")
