from bibrender.presentation.cli.app import app

app(prog_name="bibrender")
