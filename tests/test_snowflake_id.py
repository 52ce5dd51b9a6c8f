"""
Snowflake ID generation.
"""

import pytest

from app.utils.snowflake_id import SnowflakeIDGenerator, generate_snowflake_string_id


def test_ids_are_unique_and_increasing():
    generator = SnowflakeIDGenerator()
    ids = [generator.generate_id() for _ in range(5000)]

    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_machine_id_is_encoded():
    generator = SnowflakeIDGenerator(machine_id=7)
    assert (generator.generate_id() >> 12) & 1023 == 7


def test_invalid_machine_id():
    with pytest.raises(ValueError):
        SnowflakeIDGenerator(machine_id=1024)


def test_clock_rollback_is_rejected(monkeypatch):
    generator = SnowflakeIDGenerator()
    generator.generate_id()
    monkeypatch.setattr(generator, "_current_timestamp", lambda: generator.last_timestamp - 1)

    with pytest.raises(RuntimeError):
        generator.generate_id()


def test_string_ids_fit_the_id_column():
    value = generate_snowflake_string_id()
    assert value.isdigit()
    assert len(value) <= 32
