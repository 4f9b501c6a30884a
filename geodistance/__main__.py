from .cli import geodistance

geodistance(prog_name="geodistance")  # type: ignore
