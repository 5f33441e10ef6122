"""Reference palette of printable colours.

Each entry is an (r, g, b) triple of 0-255 ints that the print service
reproduces faithfully. Order is the base order for the sort views in
mandprint.core.ordering; membership and distance queries ignore it.
"""

PRINTABLE_COLORS: tuple[tuple[int, int, int], ...] = (
    (0, 73, 36),
    (0, 73, 73),
    (0, 73, 109),
    (0, 73, 146),
    (0, 109, 73),
    (0, 109, 109),
    (0, 109, 146),
    (0, 109, 182),
    (0, 146, 73),
    (0, 146, 109),
    (0, 146, 146),
    (0, 146, 182),
    (0, 182, 73),
    (0, 182, 109),
    (0, 182, 146),
    (0, 182, 182),
    (36, 36, 109),
    (36, 73, 36),
    (36, 73, 73),
    (36, 73, 109),
    (36, 73, 146),
    (36, 109, 0),
    (36, 109, 36),
    (36, 109, 73),
    (36, 109, 109),
    (36, 109, 146),
    (36, 109, 182),
    (36, 146, 0),
    (36, 146, 36),
    (36, 146, 73),
    (36, 146, 109),
    (36, 146, 146),
    (36, 146, 182),
    (36, 146, 219),
    (36, 182, 73),
    (36, 182, 109),
    (36, 182, 146),
    (36, 182, 182),
    (36, 182, 219),
    (36, 219, 182),
    (36, 219, 219),
    (73, 0, 109),
    (73, 36, 109),
    (73, 36, 146),
    (73, 73, 0),
    (73, 73, 36),
    (73, 73, 73),
    (73, 73, 109),
    (73, 73, 146),
    (73, 73, 182),
    (73, 109, 0),
    (73, 109, 36),
    (73, 109, 73),
    (73, 109, 109),
    (73, 109, 146),
    (73, 109, 182),
    (73, 109, 219),
    (73, 146, 0),
    (73, 146, 36),
    (73, 146, 73),
    (73, 146, 109),
    (73, 146, 146),
    (73, 146, 182),
    (73, 146, 219),
    (73, 182, 0),
    (73, 182, 36),
    (73, 182, 73),
    (73, 182, 109),
    (73, 182, 146),
    (73, 182, 182),
    (73, 182, 219),
    (73, 219, 182),
    (73, 219, 219),
    (73, 219, 255),
    (109, 0, 0),
    (109, 0, 36),
    (109, 0, 73),
    (109, 0, 109),
    (109, 0, 146),
    (109, 0, 182),
    (109, 36, 0),
    (109, 36, 36),
    (109, 36, 73),
    (109, 36, 109),
    (109, 36, 146),
    (109, 36, 182),
    (109, 73, 0),
    (109, 73, 36),
    (109, 73, 73),
    (109, 73, 109),
    (109, 73, 146),
    (109, 73, 182),
    (109, 109, 0),
    (109, 109, 36),
    (109, 109, 73),
    (109, 109, 109),
    (109, 109, 146),
    (109, 109, 182),
    (109, 146, 0),
    (109, 146, 36),
    (109, 146, 73),
    (109, 146, 109),
    (109, 146, 146),
    (109, 146, 182),
    (109, 146, 219),
    (109, 182, 0),
    (109, 182, 36),
    (109, 182, 73),
    (109, 182, 109),
    (109, 182, 146),
    (109, 182, 182),
    (109, 182, 219),
    (109, 182, 255),
    (109, 219, 109),
    (109, 219, 146),
    (109, 219, 182),
    (109, 219, 219),
    (109, 219, 255),
    (146, 0, 0),
    (146, 0, 36),
    (146, 0, 73),
    (146, 0, 109),
    (146, 0, 146),
    (146, 36, 0),
    (146, 36, 36),
    (146, 36, 73),
    (146, 36, 109),
    (146, 36, 146),
    (146, 73, 0),
    (146, 73, 36),
    (146, 73, 73),
    (146, 73, 109),
    (146, 73, 146),
    (146, 109, 0),
    (146, 109, 36),
    (146, 109, 73),
    (146, 109, 109),
    (146, 109, 146),
    (146, 109, 182),
    (146, 146, 0),
    (146, 146, 36),
    (146, 146, 73),
    (146, 146, 109),
    (146, 146, 146),
    (146, 146, 182),
    (146, 146, 219),
    (146, 182, 0),
    (146, 182, 36),
    (146, 182, 73),
    (146, 182, 109),
    (146, 182, 146),
    (146, 182, 182),
    (146, 182, 219),
    (146, 219, 36),
    (146, 219, 73),
    (146, 219, 109),
    (146, 219, 146),
    (146, 219, 182),
    (146, 219, 219),
    (146, 219, 255),
    (182, 0, 0),
    (182, 0, 36),
    (182, 0, 73),
    (182, 0, 109),
    (182, 0, 146),
    (182, 36, 0),
    (182, 36, 36),
    (182, 36, 73),
    (182, 36, 109),
    (182, 36, 146),
    (182, 73, 0),
    (182, 73, 36),
    (182, 73, 73),
    (182, 73, 109),
    (182, 73, 146),
    (182, 109, 0),
    (182, 109, 36),
    (182, 109, 73),
    (182, 109, 109),
    (182, 109, 146),
    (182, 109, 182),
    (182, 146, 0),
    (182, 146, 36),
    (182, 146, 73),
    (182, 146, 109),
    (182, 146, 146),
    (182, 146, 182),
    (182, 146, 219),
    (182, 182, 0),
    (182, 182, 36),
    (182, 182, 73),
    (182, 182, 109),
    (182, 182, 146),
    (182, 182, 182),
    (182, 182, 219),
    (182, 219, 0),
    (182, 219, 36),
    (182, 219, 73),
    (182, 219, 109),
    (182, 219, 146),
    (182, 219, 182),
    (182, 219, 219),
    (182, 219, 255),
    (182, 255, 255),
    (219, 0, 0),
    (219, 0, 36),
    (219, 0, 73),
    (219, 0, 109),
    (219, 0, 146),
    (219, 36, 0),
    (219, 36, 36),
    (219, 36, 73),
    (219, 36, 109),
    (219, 36, 146),
    (219, 73, 0),
    (219, 73, 36),
    (219, 73, 73),
    (219, 73, 109),
    (219, 73, 146),
    (219, 109, 0),
    (219, 109, 36),
    (219, 109, 73),
    (219, 109, 109),
    (219, 109, 146),
    (219, 109, 182),
    (219, 146, 0),
    (219, 146, 36),
    (219, 146, 73),
    (219, 146, 109),
    (219, 146, 146),
    (219, 146, 182),
    (219, 146, 219),
    (219, 182, 0),
    (219, 182, 36),
    (219, 182, 73),
    (219, 182, 109),
    (219, 182, 146),
    (219, 182, 182),
    (219, 182, 219),
    (219, 219, 0),
    (219, 219, 36),
    (219, 219, 73),
    (219, 219, 109),
    (219, 219, 146),
    (219, 219, 182),
    (219, 219, 219),
    (219, 219, 255),
    (219, 255, 73),
    (219, 255, 109),
    (219, 255, 146),
    (219, 255, 182),
    (219, 255, 219),
    (219, 255, 255),
    (255, 36, 73),
    (255, 36, 109),
    (255, 73, 73),
    (255, 73, 109),
    (255, 109, 0),
    (255, 109, 36),
    (255, 109, 73),
    (255, 109, 109),
    (255, 109, 146),
    (255, 146, 0),
    (255, 146, 36),
    (255, 146, 73),
    (255, 146, 109),
    (255, 146, 146),
    (255, 146, 182),
    (255, 146, 219),
    (255, 182, 0),
    (255, 182, 36),
    (255, 182, 73),
    (255, 182, 109),
    (255, 182, 146),
    (255, 182, 182),
    (255, 182, 219),
    (255, 219, 0),
    (255, 219, 36),
    (255, 219, 73),
    (255, 219, 109),
    (255, 219, 146),
    (255, 219, 182),
    (255, 219, 219),
    (255, 219, 255),
    (255, 255, 0),
    (255, 255, 36),
    (255, 255, 73),
    (255, 255, 109),
    (255, 255, 146),
    (255, 255, 182),
    (255, 255, 219),
    (255, 255, 255),
)
