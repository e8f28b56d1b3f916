from nullpointer.cli import app

app()
