import pytest

from termsnake import config


def test_defaults():
    args = config.parse_args([])
    assert args.width == 40
    assert args.height == 20
    assert args.highscore_file == "highscore.txt"
    assert not args.mute
    assert args.seed is None


def test_overrides():
    args = config.parse_args(["--width", "60", "--height", "30", "--mute", "--seed", "5"])
    assert (args.width, args.height) == (60, 30)
    assert args.mute
    assert args.seed == 5


@pytest.mark.parametrize("value", ["10", "wide"])
def test_bad_board_size_is_rejected(value):
    with pytest.raises(SystemExit):
        config.parse_args(["--width", value])


@pytest.mark.parametrize("score,level", [(0, 1), (49, 1), (50, 2), (55, 2), (140, 3)])
def test_level_for_score(score, level):
    assert config.level_for_score(score) == level


@pytest.mark.parametrize("level,count", [(1, 2), (3, 6), (10, 20), (12, 20)])
def test_obstacle_count(level, count):
    assert config.obstacle_count(level) == count
