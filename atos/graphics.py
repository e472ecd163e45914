"""Raw drawing onto an in-memory framebuffer of 32-bit colours."""

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768


class Surface:
    """A rectangular framebuffer addressed by pixel coordinates."""

    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, background=0):
        if width <= 0 or height <= 0:
            raise ValueError("surface dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [background] * (width * height)

    def __getitem__(self, position):
        x, y = position
        if not self._contains(x, y):
            raise IndexError(f"pixel {position} outside surface")
        return self._pixels[y * self.width + x]

    def _contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x, y, colour):
        """Set one pixel; False when it lies off the surface."""
        if not self._contains(x, y):
            return False
        self._pixels[y * self.width + x] = colour
        return True

    def draw_line(self, x1, y1, x2, y2, colour):
        """Draw a line including both end points; True if any pixel landed."""
        dx = abs(x2 - x1)
        dy = -abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx + dy
        x, y = x1, y1
        drawn = False
        while True:
            if self.draw_pixel(x, y, colour):
                drawn = True
            if x == x2 and y == y2:
                return drawn
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x += sx
            if e2 <= dx:
                err += dx
                y += sy


def draw_filled_rectangle(surface, x, y, width, height, colour):
    """Fill a rectangle row by row; True if any pixel landed."""
    if width <= 0 or height <= 0:
        return False
    drawn = False
    for row in range(y, y + height):
        if surface.draw_line(x, row, x + width - 1, row, colour):
            drawn = True
    return drawn


def draw_triangle(surface, x1, y1, x2, y2, x3, y3, colour):
    """Draw the outline of a triangle; True if any pixel landed."""
    edges = (
        surface.draw_line(x1, y1, x2, y2, colour),
        surface.draw_line(x2, y2, x3, y3, colour),
        surface.draw_line(x3, y3, x1, y1, colour),
    )
    return any(edges)


def draw_filled_triangle(surface, x1, y1, x2, y2, x3, y3, colour):
    """Fill a triangle with edge functions over its clipped bounding box.

    Pixels on an edge count as inside.  Returns False when the bounding box
    starts beyond the surface or no pixel was drawn.
    """
    min_x, max_x = min(x1, x2, x3), max(x1, x2, x3)
    min_y, max_y = min(y1, y2, y3), max(y1, y2, y3)
    if max_x < 0 or max_y < 0:
        return False
    if min_x >= surface.width or min_y >= surface.height:
        return False

    x_lo, x_hi = max(min_x, 0), min(max_x, surface.width - 1)
    y_lo, y_hi = max(min_y, 0), min(max_y, surface.height - 1)

    drawn = False
    for py in range(y_lo, y_hi + 1):
        for px in range(x_lo, x_hi + 1):
            e0 = (x2 - x1) * (py - y1) - (y2 - y1) * (px - x1)
            e1 = (x3 - x2) * (py - y2) - (y3 - y2) * (px - x2)
            e2 = (x1 - x3) * (py - y3) - (y1 - y3) * (px - x3)
            inside = (e0 >= 0 and e1 >= 0 and e2 >= 0) or (
                e0 <= 0 and e1 <= 0 and e2 <= 0
            )
            if inside and surface.draw_pixel(px, py, colour):
                drawn = True
    return drawn