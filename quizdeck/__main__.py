from quizdeck.cli.main import run

run()
