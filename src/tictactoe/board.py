BOARD_SIZE = 3
EMPTY = ""


class CellOccupiedError(Exception):
    """A move targeted a cell that already holds a mark."""

    message = "Square already assigned!"

    def __init__(self, row, column, mark):
        self.row = row
        self.column = column
        self.mark = mark
        super().__init__(self.message)


class Cell:
    __slots__ = ("mark",)

    def __init__(self):
        self.mark = EMPTY

    def is_empty(self):
        return self.mark == EMPTY


def check_coordinates(row, column):
    if type(row) is not int or type(column) is not int:
        raise ValueError("row and col must be integers.")
    if not (0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE):
        raise ValueError("Coordinates must be between 0 and 2.")


class Board:
    """
    Fixed 3x3 grid of cells.

    `set` is the only way a cell changes: a played cell can't be
    overwritten, only cleared again with an empty mark.
    """

    def __init__(self):
        self._cells = [[Cell() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]

    def set(self, row, column, mark):
        check_coordinates(row, column)
        cell = self._cells[row][column]
        # empty mark is the reset path
        if not cell.is_empty() and mark != EMPTY:
            raise CellOccupiedError(row, column, cell.mark)
        cell.mark = mark

    def get(self, row, column):
        check_coordinates(row, column)
        return self._cells[row][column].mark

    def reset(self):
        for row in range(BOARD_SIZE):
            for column in range(BOARD_SIZE):
                self.set(row, column, EMPTY)

    def rows(self):
        return [[cell.mark for cell in row] for row in self._cells]

    def __str__(self):
        lines = []
        for h, row in enumerate(self.rows()):
            lines.append(" " + " | ".join(mark if mark != EMPTY else " " for mark in row))
            if h < BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)
