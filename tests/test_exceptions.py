from plurale.exceptions import ConfigError, PluraleError, RuleError


def test_message_is_trimmed():
    error = PluraleError('''Too     many
        spaces''')
    assert str(error) == 'Too many\n spaces'


def test_rule_error():
    error = RuleError.pattern_exc('(', 'missing ), unterminated subpattern')
    assert isinstance(error, PluraleError)
    assert str(error).startswith('Can not compile rule pattern "("')


def test_config_errors():
    error = ConfigError.section_exc('inflector.cfg', 'verbs')
    assert 'unknown section "verbs"' in str(error)

    error = ConfigError.value_exc('inflector.cfg', 'irregular', 'count', 5)
    assert str(error) == ('Option "count" of section "irregular" in config '
        'file "inflector.cfg" has the wrong value "5".')
