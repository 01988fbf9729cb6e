from ycnews.cli import app

app(prog_name="ycnews")
