from takuzu.src.errors import GridReadError
from takuzu.src.grid import Grid


def load_grid(path: str) -> Grid:
    """
    Read a puzzle file line by line and parse it.

    I/O failures are wrapped in GridReadError; parse errors propagate as they are.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return Grid.parse(f)
    except (OSError, UnicodeDecodeError) as e:
        raise GridReadError(path, str(e)) from e
