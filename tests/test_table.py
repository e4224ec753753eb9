from pytest import approx

import dicetable as dt


class TestTable:
    def setup_method(self):
        self.table = dt.Table(3, 10, [1, 4, 5])

    def test_range(self):
        table = self.table
        assert table.min() == 3
        assert table.max() == 5
        assert table.norm() == 10
        assert len(table) == 3
        assert 4 in table
        assert 2 not in table
        assert 6 not in table

    def test_permutations_of(self):
        assert self.table.permutations_of(3) == 1
        assert self.table.permutations_of(4) == 4
        assert self.table.permutations_of(5) == 5

    def test_chance_of_uses_norm(self):
        table = dt.Table(0, 8, [8, 4, 2])
        assert table.chance_of(0) == 1.0
        assert table.chance_of(1) == approx(0.5)
        assert table.chance_of(2) == approx(0.25)

    def test_to_permutations(self):
        assert self.table.to_permutations() == [(3, 1), (4, 4), (5, 5)]

    def test_to_chances(self):
        chances = self.table.to_chances()
        assert [x for x, _ in chances] == [3, 4, 5]
        assert [p for _, p in chances] == approx([0.1, 0.4, 0.5])

    def test_copies_values(self):
        values = [1, 2, 3]
        table = dt.Table(0, 6, values)
        values[0] = 99
        assert table.permutations_of(0) == 1

    def test_repr(self):
        assert repr(self.table) == "Table(min=3, norm=10, values=[1, 4, 5])"


def test_round_trip():
    dist = dt.Distribution([4, 5, 5, 6, 6, 6, 9])
    for table in (dist.exactly(), dist.at_least(), dist.at_most()):
        pairs = table.to_permutations()
        for x in range(dist.min(), dist.max() + 1):
            assert pairs.count((x, table.permutations_of(x))) == 1
            assert table.chance_of(x) == approx(table.permutations_of(x) / 7)
            assert 0.0 <= table.chance_of(x) <= 1.0
        assert [x for x, _ in pairs] == list(range(4, 10))
