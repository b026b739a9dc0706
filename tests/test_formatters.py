from data.sample_words import SAMPLE_WORDS, get_random_words, get_sample_word_count
from game.models import Word, WordStat
from utils.formatters import format_average_time, format_team, format_time, format_wpm


def test_format_time():
    assert format_time(60) == '1:00'
    assert format_time(5) == '0:05'
    assert format_time(-3) == '0:00'


def test_format_average_time():
    assert format_average_time(4.3) == '4.3s'
    assert format_average_time(75) == '1m 15.0s'


def test_format_wpm():
    assert format_wpm(None) == '-'
    assert format_wpm(12.345) == '12.3'
    assert format_wpm(2, decimals=0) == '2'


def test_format_team():
    assert format_team(2) == 'Team 2'


def test_word_stat_average_display():
    stat = WordStat(word=Word('kazoo'), skips=0, average_time=3.0, total_time=9)
    assert stat.average_display == '3.0s'


def test_random_sample_words_exclude_existing():
    words = get_random_words(5, exclude=['ZEBRA', 'yeti'])
    assert len(words) == 5
    assert len(set(words)) == 5
    assert 'zebra' not in words and 'yeti' not in words
    assert all(w in SAMPLE_WORDS for w in words)


def test_random_sample_words_caps_at_available():
    words = get_random_words(get_sample_word_count() + 10)
    assert len(words) == get_sample_word_count()
