from collections import Counter

import pytest

from glasspass.core import (
    CANONICAL_ORDER,
    NUMBERS,
    GenerationConfig,
    InvalidConfiguration,
    PasswordGenerator,
    SeededRandomSource,
    generate,
)
from glasspass.core.password_generator import (
    available_chars,
    fill_chars,
    guaranteed_chars,
    shuffle,
)

from .conftest import RecordingSource

ALL_FLAG_COMBOS = [
    (lower, upper, digits, symbols)
    for lower in (True, False)
    for upper in (True, False)
    for digits in (True, False)
    for symbols in (True, False)
    if lower or upper or digits or symbols
]


def make_config(length, flags):
    lower, upper, digits, symbols = flags
    return GenerationConfig(
        length=length,
        include_lowercase=lower,
        include_uppercase=upper,
        include_numbers=digits,
        include_symbols=symbols,
    )


@pytest.mark.parametrize('flags', ALL_FLAG_COMBOS)
@pytest.mark.parametrize('length', [4, 5, 16, 64])
def test_length_and_every_enabled_class_present(flags, length):
    config = make_config(length, flags)
    password = generate(config, SeededRandomSource(length))

    assert len(password) == length
    pool = available_chars(config)
    assert all(c in pool for c in password)
    for char_class in config.enabled_classes:
        assert any(c in char_class for c in password)


def test_length_one_single_class():
    password = generate(make_config(1, (False, False, True, False)))
    assert len(password) == 1
    assert password in NUMBERS


def test_all_classes_disabled_fails_before_drawing(recording_source):
    config = make_config(8, (False, False, False, False))
    with pytest.raises(InvalidConfiguration):
        generate(config, recording_source)
    assert recording_source.calls == []


def test_length_shorter_than_class_count_is_rejected(recording_source):
    with pytest.raises(InvalidConfiguration):
        generate(GenerationConfig(length=2), recording_source)
    assert recording_source.calls == []


def test_available_chars_follow_canonical_order():
    config = GenerationConfig()
    assert available_chars(config) == ''.join(c.characters for c in CANONICAL_ORDER)

    config = make_config(4, (False, True, False, True))
    assert available_chars(config) == (
        'ABCDEFGHIJKLMNOPQRSTUVWXYZ' + '!@#$%^&*()_+-=[]{}|;:,.<>?'
    )


def test_draw_order_guaranteed_then_fill_then_shuffle():
    source = RecordingSource()
    config = make_config(4, (True, False, True, False))

    password = generate(config, source)

    # guaranteed: lowercase, numbers; fill: 2 from pool of 36;
    # shuffle: randbelow(i + 1) for i = 3, 2, 1.
    assert source.calls == [26, 10, 36, 36, 4, 3, 2]
    assert password == '0aaa'


def test_guaranteed_chars_one_per_class_in_order():
    source = RecordingSource([1, 2, 3, 4])
    assert guaranteed_chars(GenerationConfig(), source) == ['b', 'C', '3', '%']


def test_fill_chars_draws_with_replacement():
    source = RecordingSource([0, 0, 2])
    assert fill_chars('xyz', 3, source) == ['x', 'x', 'z']
    assert fill_chars('xyz', 0, source) == []


def test_shuffle_uses_inclusive_upper_bound():
    source = RecordingSource()
    shuffle(list('abcdef'), source)
    assert source.calls == [6, 5, 4, 3, 2]


def test_shuffle_is_a_permutation_and_leaves_input_alone():
    chars = list('aabbc!9')
    shuffled = shuffle(chars, SeededRandomSource(7))
    assert Counter(shuffled) == Counter(chars)
    assert chars == list('aabbc!9')


def test_shuffle_short_sequences():
    source = RecordingSource()
    assert shuffle([], source) == []
    assert shuffle(['q'], source) == ['q']
    assert source.calls == []


def test_output_is_permutation_of_drawn_characters():
    config = GenerationConfig(length=20)
    source = SeededRandomSource(99)
    password = generate(config, source)

    replay = SeededRandomSource(99)
    drawn = guaranteed_chars(config, replay)
    drawn += fill_chars(available_chars(config), config.length - len(drawn), replay)
    assert Counter(password) == Counter(drawn)


def test_same_seed_same_password():
    config = GenerationConfig(length=24)
    assert generate(config, SeededRandomSource(5)) == generate(config, SeededRandomSource(5))


def test_single_class_distribution_is_roughly_uniform():
    config = make_config(1, (False, False, True, False))
    source = SeededRandomSource(1234)
    counts = Counter(generate(config, source) for _ in range(10_000))

    assert set(counts) == set(NUMBERS.characters)
    for digit in NUMBERS.characters:
        assert 800 < counts[digit] < 1200


def test_password_generator_wrapper():
    generator = PasswordGenerator(length=10, use_special=False, rng=SeededRandomSource(3))
    config = generator.to_config()
    assert config == GenerationConfig(length=10, include_symbols=False)

    password = generator.generate_password()
    assert len(password) == 10
    assert not any(c in '!@#$%^&*()_+-=[]{}|;:,.<>?' for c in password)


def test_password_generator_wrapper_rejects_no_classes():
    generator = PasswordGenerator(
        use_lower=False, use_upper=False, use_digits=False, use_special=False,
    )
    with pytest.raises(ValueError):
        generator.generate_password()
