from glossa.cli.main import app

app(prog_name="glossa")
