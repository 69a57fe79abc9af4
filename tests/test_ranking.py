"""Unit tests for the ranking engine and leaderboard assembly."""

import math
from itertools import permutations

import pytest

from leaderboard.assembler import assemble_players, spend_per_point
from leaderboard.models import PlayerRecord, PointsTable, SpendingTable, SpendRow
from leaderboard.ranking import (
    TieBreak,
    compare_players,
    compare_with_reason,
    countback_compare,
    rank_players,
)


def player(name: str, scores: list, spent: float = 0) -> PlayerRecord:
    return PlayerRecord(name=name, scores=scores, total_spent=spent)


class TestCountback:
    """Tests for countback comparison of round scores."""

    def test_higher_score_held_by_one_player(self):
        """B holds the 4 that A never scored, so B ranks higher."""
        assert countback_compare([3, 3, 1], [2, 4, 1]) == 1
        assert countback_compare([2, 4, 1], [3, 3, 1]) == -1

    def test_more_occurrences_of_top_score(self):
        assert countback_compare([60, 60, 40], [60, 50, 50]) == -1

    def test_moves_down_when_counts_match(self):
        """Equal counts of the top score defer to the next score down."""
        assert countback_compare([10, 8, 2], [10, 7, 3]) == -1

    def test_identical_multisets_tie(self):
        assert countback_compare([5, 3, 1], [1, 5, 3]) == 0

    def test_int_and_float_scores_are_equal(self):
        assert countback_compare([10, 5], [10.0, 5.0]) == 0

    def test_empty_scores(self):
        assert countback_compare([], []) == 0


class TestComparator:
    """Tests for the four-stage comparator."""

    def test_points_descending(self):
        a = player('A', [20])
        b = player('B', [10])
        assert compare_with_reason(a, b) == (-1, TieBreak.POINTS)
        assert compare_players(b, a) == 1

    def test_spend_ascending(self):
        a = player('A', [10], spent=10)
        b = player('B', [10], spent=20)
        assert compare_with_reason(a, b) == (-1, TieBreak.SPEND)

    def test_countback_after_spend(self):
        a = player('A', [3, 3, 1], spent=5)
        b = player('B', [2, 4, 1], spent=5)
        assert a.total_points == b.total_points == 7
        assert compare_players(a, b) > 0
        assert compare_with_reason(a, b)[1] is TieBreak.COUNTBACK

    def test_name_is_case_insensitive(self):
        a = player('alice', [5])
        b = player('Bob', [5])
        assert compare_with_reason(a, b) == (-1, TieBreak.NAME)
        assert compare_players(player('ALICE', [5]), player('alice', [5])) == 0

    def test_self_comparison_is_zero(self):
        a = player('A', [3, 2], spent=1)
        assert compare_players(a, a) == 0

    def test_antisymmetric(self):
        players = [
            player('Dan', [5, 5, 5], spent=2.5),
            player('alice', [10, 5, 0], spent=3),
            player('Bob', [8, 7, 0], spent=3),
            player('Cara', [6, 6, 6]),
            player('Eve', [5, 5, 5], spent=2.5),
        ]
        for a, b in permutations(players, 2):
            assert compare_players(a, b) == -compare_players(b, a)

    def test_comparator_has_no_side_effects(self):
        a = player('A', [5], spent=1)
        b = player('B', [5], spent=2)
        compare_players(a, b)
        assert not a.tied and not b.tied


class TestRankPlayers:
    """Tests for sorting, tie flags and output projection."""

    def test_countback_resolves_tie(self):
        """Alice holds the top score of 10, so she ranks first and nobody is tied."""
        entries = rank_players([player('Bob', [8, 7]), player('Alice', [10, 5])])

        assert [(e.rank, e.name) for e in entries] == [(1, 'Alice'), (2, 'Bob')]
        assert [e.total_points for e in entries] == [15, 15]
        assert [e.tied for e in entries] == [False, False]

    def test_full_tie_ordered_by_name(self):
        entries = rank_players([player('beta', [5, 3], spent=1), player('Alpha', [3, 5], spent=1)])

        assert [e.name for e in entries] == ['Alpha', 'beta']
        assert [e.rank for e in entries] == [1, 2]
        assert all(e.tied for e in entries)

    def test_spend_resolved_tie_stays_flagged(self):
        """Spend decides the order but the pair is still reported as tied."""
        entries = rank_players([player('Big Spender', [10], spent=20), player('Saver', [10], spent=5)])

        assert [e.name for e in entries] == ['Saver', 'Big Spender']
        assert all(e.tied for e in entries)

    def test_different_points_not_tied(self):
        entries = rank_players([player('A', [1]), player('B', [2]), player('C', [3])])
        assert [e.name for e in entries] == ['C', 'B', 'A']
        assert not any(e.tied for e in entries)

    def test_tie_flag_per_pair_within_group(self):
        """Only players left level with someone are flagged."""
        entries = rank_players(
            [
                player('Zed', [10, 5]),
                player('Amy', [9, 6]),
                player('Ben', [9, 6]),
                player('Top', [20]),
            ]
        )
        by_name = {e.name: e for e in entries}

        assert [e.name for e in entries] == ['Top', 'Zed', 'Amy', 'Ben']
        assert not by_name['Top'].tied
        assert not by_name['Zed'].tied
        assert by_name['Amy'].tied
        assert by_name['Ben'].tied

    def test_ranks_are_sequential(self):
        entries = rank_players([player(name, [1]) for name in 'dcba'])
        assert [e.rank for e in entries] == [1, 2, 3, 4]
        assert [e.name for e in entries] == ['a', 'b', 'c', 'd']

    def test_projection_rounding(self):
        record = player('A', [10, 5], spent=10.004)
        record.spent_per_pt = spend_per_point(record.total_spent, record.total_points)
        entry = rank_players([record])[0]

        assert entry.total_spent == 10.0
        assert entry.spent_per_pt == 0.667
        assert entry.scores == [10, 5]

    def test_infinite_spend_per_point_rendered_as_zero(self):
        record = player('A', [0, 0], spent=5)
        record.spent_per_pt = math.inf
        entry = rank_players([record])[0]
        assert entry.spent_per_pt == 0.0
        assert entry.total_spent == 5.0

    def test_serialises_with_camel_case_keys(self):
        entry = rank_players([player('Alice', [10, 5])])[0]
        assert entry.model_dump(by_alias=True) == {
            'rank': 1,
            'name': 'Alice',
            'totalPoints': 15,
            'totalSpent': 0.0,
            'spentPerPt': 0.0,
            'tied': False,
            'scores': [10, 5],
        }

    def test_empty(self):
        assert rank_players([]) == []


class TestAssembler:
    """Tests for joining spend onto player records."""

    def make_points(self, *players):
        return PointsTable(header_row=1, player_column=1, players=list(players))

    def make_spending(self, *rows):
        return SpendingTable(
            header_row=10,
            player_column=1,
            rows=[SpendRow(name=n, total_spent=s, row_index=11 + i) for i, (n, s) in enumerate(rows)],
        )

    def test_join_is_case_insensitive(self):
        points = self.make_points(player('Alice', [10, 5]), player('Bob', [0]))
        spending = self.make_spending((' ALICE ', 3.0), ('bob', 2))
        players = assemble_players(points, spending)

        assert players[0].total_spent == 3.0
        assert players[0].spent_per_pt == pytest.approx(0.2)
        assert players[1].total_spent == 2
        assert math.isinf(players[1].spent_per_pt)

    def test_unmatched_spending_rows_ignored(self):
        points = self.make_points(player('Alice', [1]))
        spending = self.make_spending(('Zed', 9))
        players = assemble_players(points, spending)

        assert [p.name for p in players] == ['Alice']
        assert players[0].total_spent == 0

    def test_without_spending_table(self):
        players = assemble_players(self.make_points(player('Alice', [4])))
        assert players[0].total_spent == 0
        assert players[0].spent_per_pt == 0

    def test_duplicate_names_first_record_wins(self):
        first = player('Alice', [1])
        second = player('alice', [2])
        assemble_players(self.make_points(first, second), self.make_spending(('Alice', 7)))
        assert first.total_spent == 7
        assert second.total_spent == 0

    def test_total_points_is_sum_of_scores(self):
        record = player('A', [3.5, 0, 2])
        assert record.total_points == 5.5
