from spliminal.cli import app

app()
