from PIL import Image, ImageDraw, ImageFont

from takuzu.src.grid import Cell, Grid

BACKGROUND_COLOR = (248, 248, 252)
GRID_COLOR = (40, 40, 50)
ZERO_COLOR = (41, 128, 185)
ONE_COLOR = (192, 57, 43)
FONTS = ["Arial.ttf", "Helvetica.ttf", "DejaVuSans.ttf", "Verdana.ttf"]


def _load_font(size: int):
    for font in FONTS:
        try:
            return ImageFont.truetype(font, size)
        except OSError:
            continue
    return ImageFont.load_default()


def render_puzzle_image(grid: Grid, cell_size: int = 60, border: int = 20) -> Image.Image:
    """
    Draw the grid as a PNG-ready image: blue 0s, red 1s, unknown cells left blank.
    """
    width = grid.width * cell_size + 2 * border
    height = grid.height * cell_size + 2 * border
    img = Image.new("RGB", (width, height), color=BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)
    font = _load_font(cell_size // 2)

    for i in range(grid.height + 1):
        y = border + i * cell_size
        draw.line([(border, y), (width - border, y)], fill=GRID_COLOR, width=2)
    for j in range(grid.width + 1):
        x = border + j * cell_size
        draw.line([(x, border), (x, height - border)], fill=GRID_COLOR, width=2)

    for i in range(grid.height):
        for j in range(grid.width):
            cell = grid[i, j]
            if cell is None:
                continue
            digit = str(cell)
            left, top, right, bottom = draw.textbbox((0, 0), digit, font=font)
            x = border + j * cell_size + (cell_size - (right - left)) // 2 - left
            y = border + i * cell_size + (cell_size - (bottom - top)) // 2 - top
            draw.text((x, y), digit, fill=ZERO_COLOR if cell is Cell.ZERO else ONE_COLOR, font=font)

    return img
