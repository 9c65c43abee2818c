"""a domain object that becomes enumerable by describing its own slot."""
from enumerable import EnumerableMixin


class Range(EnumerableMixin[int]):
    def __init__(self, start: int, stop: int):
        self.start = start
        self.stop = stop
        self._items = None

    def _get_data(self):
        # inclusive bounds, built on first use
        if self._items is None:
            self._items = list(range(self.start, self.stop + 1))
        return self._items

    def _set_data(self, data):
        self._items = data


if __name__ == "__main__":
    numbers = Range(5, 10)
    numbers.each(lambda n, i: print(f"{i}: {n}"))
    print(numbers.fork().select(lambda n: n % 2 == 0).map(lambda n: n * n))
    print(numbers.in_groups_of(4))
