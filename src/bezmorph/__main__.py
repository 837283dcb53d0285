from bezmorph.cli import app

app(prog_name="bezmorph")
