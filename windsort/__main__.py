from windsort.cli import app

app(prog_name="windsort")
