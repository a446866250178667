"""Tests for configuration and schema loading."""

import json

import pytest

from ninecat.config import clear_config_cache, get_config
from ninecat.schemas import LeagueSnapshot, PlayerRecord
from ninecat.utils import clean_name, load_json, match_name


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_config_cache()
    yield
    clear_config_cache()


class TestConfig:
    """Tests for bot configuration."""

    def test_defaults(self, tmp_path):
        """Test optional settings fall back to defaults."""
        path = tmp_path / 'bot_config.json'
        path.write_text(json.dumps({'league_key': '428.l.1', 'snapshot_path': 'data/league.json'}))
        config = get_config(path)
        assert config.league_key == '428.l.1'
        assert config.free_agent_count == 5
        assert config.leader_count == 5
        assert config.timezone == 'America/Los_Angeles'
        assert config.webhook_url is None

    def test_cached(self, tmp_path):
        """Test the config is read once per path until the cache is cleared."""
        path = tmp_path / 'bot_config.json'
        path.write_text(json.dumps({'league_key': 'a', 'snapshot_path': 's'}))
        first = get_config(path)
        path.write_text(json.dumps({'league_key': 'b', 'snapshot_path': 's'}))
        assert get_config(path) is first
        clear_config_cache()
        assert get_config(path).league_key == 'b'

    def test_unknown_field_rejected(self, tmp_path):
        path = tmp_path / 'bot_config.json'
        path.write_text(json.dumps({'league_key': 'a', 'snapshot_path': 's', 'token': 'x'}))
        with pytest.raises(ValueError, match='Schema validation failed'):
            get_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_config(tmp_path / 'missing.json')


class TestSchemas:
    """Tests for snapshot schema rules."""

    def test_invalid_period(self):
        with pytest.raises(ValueError):
            PlayerRecord(key='p', name='P', stats={'decade': {12: 1.0}})

    def test_invalid_daily_date(self):
        with pytest.raises(ValueError):
            LeagueSnapshot(
                league_key='l', current_week=1, teams=[], daily_stats={'yesterday': {}}
            )

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{not json')
        with pytest.raises(json.JSONDecodeError):
            load_json(path)


class TestNameMatching:
    """Tests for player name matching."""

    def test_clean_name(self):
        assert clean_name('  Jaren   Jackson Jr. ') == 'jaren jackson'

    def test_exact_before_partial(self):
        names = ['Jalen Williams', 'Jalen Williams Sr', 'Jaylin Williams']
        assert match_name('jalen williams', names, str) == 'Jalen Williams'

    def test_partial(self):
        assert match_name('doncic', ['LeBron James', 'Luka Doncic'], str) == 'Luka Doncic'

    def test_unique_last_name(self):
        assert match_name('L. Doncic', ['LeBron James', 'Luka Doncic'], str) == 'Luka Doncic'

    def test_ambiguous_last_name(self):
        assert match_name('X Williams', ['Jalen Williams', 'Mark Williams'], str) is None

    def test_empty_query(self):
        assert match_name('  ', ['Luka Doncic'], str) is None

    def test_ambiguous_partial(self):
        """Test a substring shared by several players matches nobody."""
        names = ['LeBron James', 'James Harden', 'Jalen Brunson']
        assert match_name('james', names, str) is None

    def test_unique_partial_among_many(self):
        names = ['LeBron James', 'James Harden', 'Jalen Brunson']
        assert match_name('harden', names, str) == 'James Harden'

    def test_short_query(self):
        """Test queries under three letters never match."""
        names = ['Luka Doncic', 'Al Horford']
        assert match_name('a', names, str) is None
        assert match_name('lu', names, str) is None
        assert match_name('al ', names, str) is None

    def test_three_letters(self):
        assert match_name('luk', ['Luka Doncic', 'Al Horford'], str) == 'Luka Doncic'
