"""Property-based tests for the environment accessors.

Covers the lookup/default/require contracts of both accessors over
arbitrary variable names and values using Hypothesis.
"""

from contextlib import contextmanager

import pytest
from hypothesis import given, settings, strategies as st

from envaccess import Env, MissingVariableError, NBEnv


# Variable names are namespaced so generated keys never collide with real ones.
name_strategy = st.text(
    alphabet=st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"),
    min_size=1,
    max_size=20,
).map(lambda s: f"PBT_{s}")

# os.environ rejects NUL and cannot round-trip lone surrogates.
value_strategy = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\x00"),
    max_size=40,
)

blank_strategy = st.text(alphabet=st.sampled_from(" \t\n\r\x0b\x0c"), max_size=10)

non_blank_strategy = value_strategy.filter(lambda s: s.strip() != "")

default_strategy = st.one_of(st.none(), st.integers(), st.text(max_size=10))

accessor_strategy = st.sampled_from([Env, NBEnv])


@contextmanager
def bound(name: str, value: str | None):
    """Temporarily bind (or unbind, for None) a single environment variable."""
    with pytest.MonkeyPatch.context() as mp:
        if value is None:
            mp.delenv(name, raising=False)
        else:
            mp.setenv(name, value)
        yield


class TestUnsetVariables:
    @given(name=name_strategy, accessor=accessor_strategy)
    @settings(max_examples=50)
    def test_unset_is_absent_for_both_accessors(self, name, accessor):
        with bound(name, None):
            assert accessor.get(name) is None

    @given(name=name_strategy, accessor=accessor_strategy)
    @settings(max_examples=50)
    def test_require_unset_raises(self, name, accessor):
        with bound(name, None):
            with pytest.raises(MissingVariableError) as exc_info:
                accessor.require(name)
            assert exc_info.value.name == name
            assert exc_info.value.blank is False


class TestBlankVariables:
    @given(name=name_strategy, value=blank_strategy)
    @settings(max_examples=50)
    def test_env_returns_blank_unchanged(self, name, value):
        with bound(name, value):
            assert Env.get(name) == value

    @given(name=name_strategy, value=blank_strategy)
    @settings(max_examples=50)
    def test_nbenv_treats_blank_as_absent(self, name, value):
        with bound(name, value):
            assert NBEnv.get(name) is None

    @given(name=name_strategy, value=blank_strategy)
    @settings(max_examples=50)
    def test_nbenv_require_mapped_blank_never_maps(self, name, value):
        calls = []
        with bound(name, value):
            with pytest.raises(MissingVariableError) as exc_info:
                NBEnv.require_mapped(name, calls.append)
        assert calls == []
        assert exc_info.value.blank is True


class TestSetVariables:
    @given(name=name_strategy, value=non_blank_strategy, accessor=accessor_strategy)
    @settings(max_examples=50)
    def test_non_blank_values_round_trip(self, name, value, accessor):
        with bound(name, value):
            assert accessor.get(name) == value
            assert accessor.require(name) == value


class TestDefaults:
    @given(
        name=name_strategy,
        value=st.one_of(st.none(), value_strategy),
        default=default_strategy,
        accessor=accessor_strategy,
    )
    @settings(max_examples=100)
    def test_get_or_matches_get(self, name, value, default, accessor):
        with bound(name, value):
            found = accessor.get(name)
            expected = default if found is None else found
            assert accessor.get_or(name, default) == expected

    @given(
        name=name_strategy,
        value=st.one_of(st.none(), value_strategy),
        accessor=accessor_strategy,
    )
    @settings(max_examples=100)
    def test_provider_only_called_on_miss(self, name, value, accessor):
        calls = []

        def provider():
            calls.append(True)
            return "fallback"

        with bound(name, value):
            missing = accessor.get(name) is None
            accessor.get_or_else(name, provider)
        assert len(calls) == (1 if missing else 0)


class TestRequireMapped:
    @given(
        name=name_strategy,
        value=st.one_of(st.none(), value_strategy),
        accessor=accessor_strategy,
    )
    @settings(max_examples=100)
    def test_mapper_called_once_or_not_at_all(self, name, value, accessor):
        calls = []

        def mapper(raw):
            calls.append(raw)
            return len(raw)

        with bound(name, value):
            resolved = accessor.get(name)
            if resolved is None:
                with pytest.raises(MissingVariableError):
                    accessor.require_mapped(name, mapper)
                assert calls == []
            else:
                assert accessor.require_mapped(name, mapper) == len(resolved)
                assert calls == [resolved]
