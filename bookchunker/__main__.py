from bookchunker.cli import app

app(prog_name="bookchunker")
