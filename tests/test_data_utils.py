import polars as pl
import pytest
from bbt import MatchDataset, Rater, Rating


@pytest.fixture
def match_df():
    return pl.DataFrame(
        {
            'match_id': [7, 7, 3, 3, 3, 3],
            'team_id': [0, 1, 0, 0, 1, 1],
            'player_id': ['alice', 'bob', 'alice', 'carol', 'bob', 'dave'],
            'rank': [1, 2, 2, 2, 1, 1],
        }
    )


def test_dataset_from_dataframe(match_df):
    dataset = MatchDataset(match_df)
    assert len(dataset) == 2
    assert list(dataset) == [
        ([['alice'], ['bob']], [1, 2]),
        ([['alice', 'carol'], ['bob', 'dave']], [2, 1]),
    ]
    assert dataset.players == ['alice', 'bob', 'carol', 'dave']
    assert dataset.num_players == 4


def test_dataset_custom_columns():
    df = pl.DataFrame({'game': [1, 1, 1], 'side': ['x', 'y', 'z'], 'name': ['a', 'b', 'c'], 'place': [2, 1, 2]})
    dataset = MatchDataset(df, match_col='game', team_col='side', player_col='name', rank_col='place', verbose=False)
    assert list(dataset) == [([['a'], ['b'], ['c']], [2, 1, 2])]


def test_dataset_missing_column(match_df):
    with pytest.raises(ValueError):
        MatchDataset(match_df.drop('rank'))


def test_dataset_slice(match_df):
    dataset = MatchDataset(match_df, verbose=False)
    head = dataset[:1]
    assert len(head) == 1
    assert head.players == ['alice', 'bob']
    with pytest.raises(ValueError):
        dataset[0]


def test_fit_dataset_matches_manual_updates(match_df):
    rater = Rater()
    ratings = rater.fit_dataset(MatchDataset(match_df, verbose=False))

    alice, bob, carol, dave = (Rating.default() for _ in range(4))
    rater.update_ratings([[alice], [bob]], [1, 2])
    rater.update_ratings([[alice, carol], [bob, dave]], [2, 1])

    assert set(ratings) == {'alice', 'bob', 'carol', 'dave'}
    assert ratings['alice'] == alice
    assert ratings['bob'] == bob
    assert ratings['carol'] == carol
    assert ratings['dave'] == dave


def test_fit_dataset_continues_from_existing_ratings():
    dataset = MatchDataset.init_from_lists([([['a'], ['b']], [1, 2])])
    ratings = {'a': Rating(40.0, 2.0)}
    returned = Rater().fit_dataset(dataset, ratings=ratings)
    assert returned is ratings
    assert ratings['a'].mu > 40.0
    assert ratings['b'].mu < 25.0


def test_print_leaderboard(capsys):
    ratings = {'low': Rating(20.0, 1.0), 'high': Rating(30.0, 1.0), 'new': Rating.default()}
    Rater().print_leaderboard(ratings, num_places=2)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith('competitor')
    assert lines[1].startswith('high')
    assert lines[2].startswith('low')


def test_dataset_team_with_conflicting_ranks(match_df):
    df = match_df.with_columns(pl.Series('rank', [1, 2, 2, 1, 1, 1]))
    with pytest.raises(ValueError):
        MatchDataset(df, verbose=False)
