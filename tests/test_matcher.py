"""Tests for the matcher object, the factory and its type dispatch table."""

import re

import pytest

from assertmatch import ArgumentError, Matcher, create_matcher, is_matcher, match
from assertmatch.matcher import TYPE_MAP, match_object
from tests.models import Point, Predicate


# =============================================================================
# FACTORY
# =============================================================================

class TestCreateMatcher:
    def test_returns_matcher(self):
        assert isinstance(create_matcher(1), Matcher)
        assert is_matcher(create_matcher('foo'))

    def test_namespace_is_the_factory(self):
        assert match('foo').test('foo') is True
        assert match.create_matcher is create_matcher
        assert match.createMatcher is create_matcher

    def test_custom_message_replaces_default(self):
        assert create_matcher(1, 'one').message == 'one'
        assert create_matcher(lambda actual: True, 'always').message == 'always'
        assert create_matcher({'a': 1}, 'has a').message == 'has a'

    def test_too_many_arguments(self):
        with pytest.raises(ArgumentError, match='Expected 1 or 2 arguments, received 3'):
            create_matcher(1, 2, 3)

    def test_no_arguments(self):
        with pytest.raises(ArgumentError):
            create_matcher()

    def test_message_must_be_string(self):
        with pytest.raises(ArgumentError, match='Message should be a string'):
            create_matcher(1, 2)

    def test_argument_error_is_type_error(self):
        with pytest.raises(TypeError) as info:
            create_matcher(1, None)
        assert str(info.value).startswith('ArgumentError [ERR_INVALID_ARG_TYPE]: ')
        assert info.value.code == 'ERR_INVALID_ARG_TYPE'

    def test_dispatch_table_tags(self):
        assert sorted(TYPE_MAP) == ['function', 'number', 'object', 'regexp', 'string']


# =============================================================================
# DISPATCH TABLE
# =============================================================================

class TestStringExpectation:
    def test_substring(self):
        matcher = create_matcher('foo')

        assert matcher.test('xxfooyy') is True
        assert matcher.test('foo') is True
        assert matcher.test('bar') is False

    def test_rejects_non_strings(self):
        matcher = create_matcher('foo')

        assert matcher.test(42) is False
        assert matcher.test(None) is False
        assert matcher.test(['foo']) is False

    def test_message(self):
        assert create_matcher('foo').message == 'match("foo")'

    def test_not_a_pattern(self):
        assert create_matcher('a.c').test('abc') is False


class TestRegexpExpectation:
    def test_searches_strings(self):
        matcher = create_matcher(re.compile('^a'))

        assert matcher.test('abc') is True
        assert matcher.test('bca') is False
        assert matcher.test(1) is False

    def test_unanchored_search(self):
        assert create_matcher(re.compile('b')).test('abc') is True

    def test_pattern_and_subject_types_agree(self):
        matcher = create_matcher(re.compile(b'a'))

        assert matcher.test(b'abc') is True
        assert matcher.test('abc') is False
        assert create_matcher(re.compile('a')).test(b'abc') is False

    def test_message(self):
        assert create_matcher(re.compile('^a')).message == 'match(/^a/)'


class TestNumberExpectation:
    def test_equal_numbers(self):
        assert create_matcher(1).test(1) is True
        assert create_matcher(1).test(1.0) is True
        assert create_matcher(1).test(2) is False

    def test_coerces(self):
        assert create_matcher(1).test('1') is True
        assert create_matcher(0).test('') is True
        assert create_matcher(1).test(True) is True
        assert create_matcher(1).test('one') is False
        assert create_matcher(1).test(None) is False

    def test_message(self):
        assert create_matcher(42).message == 'match(42)'


class TestFunctionExpectation:
    def test_function_is_the_test(self):
        def is_even(actual):
            return actual % 2 == 0

        matcher = create_matcher(is_even)

        assert matcher.test is is_even
        assert matcher.test(2) is True
        assert matcher.test(3) is False

    def test_message_uses_function_name(self):
        def is_even(actual):
            return actual % 2 == 0

        assert create_matcher(is_even).message == 'match(is_even)'
        assert create_matcher(lambda actual: True).message == 'match(<lambda>)'


class TestObjectExpectation:
    def test_subset(self):
        assert create_matcher({'a': 1}).test({'a': 1, 'b': 2}) is True
        assert create_matcher({'a': 1, 'c': 3}).test({'a': 1, 'b': 2}) is False

    def test_nested_subset(self):
        matcher = create_matcher({'a': {'b': 1}})

        assert matcher.test({'a': {'b': 1, 'c': 2}}) is True
        assert matcher.test({'a': {'b': 2}}) is False
        assert matcher.test({'a': None}) is False
        assert matcher.test({}) is False

    def test_nested_matchers(self):
        matcher = create_matcher({'id': match.number, 'name': match('bo')})

        assert matcher.test({'id': 3, 'name': 'bob'}) is True
        assert matcher.test({'id': '3', 'name': 'bob'}) is False

    def test_nested_matcher_sees_missing_as_none(self):
        matcher = create_matcher({'a': match.defined})

        assert matcher.test({'a': 0}) is True
        assert matcher.test({}) is False

    def test_leaf_values_compare_deeply(self):
        matcher = create_matcher({'tags': ['a', 'b']})

        assert matcher.test({'tags': ['a', 'b']}) is True
        assert matcher.test({'tags': ['a']}) is False

    def test_matchers_inside_leaf_values(self):
        assert create_matcher({'ids': [match.number]}).test({'ids': [7]}) is True

    def test_none_actual(self):
        assert create_matcher({'a': 1}).test(None) is False

    def test_instances_as_actual(self, point):
        assert create_matcher({'x': 1}).test(point) is True
        assert create_matcher({'x': 1, 'y': 3}).test(point) is False

    def test_instances_as_expectation(self):
        assert create_matcher(Point(1, 2)).test({'x': 1, 'y': 2, 'z': 3}) is True

    def test_message_lists_keys(self):
        assert create_matcher({'a': 1, 'b': 'x'}).message == 'match(a: 1, b: x)'

    def test_cyclic_expectation_recurses_without_bound(self):
        expectation = {}
        expectation['self'] = expectation

        with pytest.raises(RecursionError):
            create_matcher(expectation).test(expectation)


class TestForeignPredicate:
    def test_adapts_test_method(self):
        assert create_matcher(Predicate(True)).test('anything') is True
        assert create_matcher(Predicate(False)).test('anything') is False

    def test_requires_exactly_true(self):
        assert create_matcher(Predicate(1)).test('anything') is False

    def test_dict_with_callable_test(self):
        assert create_matcher({'test': lambda actual: actual == 2}).test(2) is True

    def test_not_recognised_as_matcher(self):
        assert is_matcher(Predicate(True)) is False

    def test_message(self):
        assert create_matcher(Predicate(True)).message == 'match(test)'


class TestDeepEqualFallback:
    def test_arrays(self):
        assert create_matcher([1, 2]).test([1, 2]) is True
        assert create_matcher([1, 2]).test([1, 2, 3]) is False

    def test_booleans_are_not_numbers(self):
        assert create_matcher(True).test(True) is True
        assert create_matcher(True).test(1) is False

    def test_none(self):
        assert create_matcher(None).test(None) is True
        assert create_matcher(None).test(0) is False

    def test_message(self):
        assert create_matcher([1, 2]).message == 'match([1, 2])'
        assert create_matcher(None).message == 'match(None)'


# =============================================================================
# MATCHER OBJECT
# =============================================================================

class TestMatcherObject:
    def test_str_is_message(self):
        matcher = create_matcher('foo')

        assert str(matcher) == 'match("foo")'
        assert 'match("foo")' in repr(matcher)

    def test_immutable(self):
        matcher = create_matcher(1)

        with pytest.raises(AttributeError):
            matcher.test = lambda actual: True
        with pytest.raises(AttributeError):
            matcher.message = 'other'

    def test_repeated_tests_agree(self):
        matcher = create_matcher({'a': [1, {'b': 2}]})
        actual = {'a': [1, {'b': 2}], 'c': 3}

        assert [matcher.test(actual) for _ in range(3)] == [True, True, True]
        assert actual == {'a': [1, {'b': 2}], 'c': 3}


class TestCombinators:
    def test_or(self):
        matcher = create_matcher(1).or_(create_matcher('a'))

        assert matcher.test(1) is True
        assert matcher.test('xa') is True
        assert matcher.test(2) is False
        assert matcher.message == 'match(1).or(match("a"))'

    def test_and(self):
        matcher = match.string.and_(create_matcher('a'))

        assert matcher.test('ab') is True
        assert matcher.test('b') is False
        assert matcher.message == 'typeOf("string").and(match("a"))'

    def test_coerces_plain_values(self):
        matcher = match.string.or_(5)

        assert matcher.test(5) is True
        assert matcher.message == 'typeOf("string").or(match(5))'

    def test_operators(self):
        assert (match.string | match.number).test(1) is True
        assert (match.string & match('a')).test(1) is False

    def test_short_circuits(self):
        calls = []

        def record(actual):
            calls.append(actual)
            return True

        match.any.or_(create_matcher(record)).test(1)
        match.falsy.and_(create_matcher(record)).test(1)

        assert calls == []

    def test_does_not_change_operands(self):
        left, right = create_matcher(1), create_matcher(2)
        left.or_(right)

        assert left.message == 'match(1)'
        assert right.message == 'match(2)'

    def test_requires_argument(self):
        with pytest.raises(ArgumentError, match='Matcher expected'):
            match.any.or_()
        with pytest.raises(ArgumentError, match='Matcher expected'):
            match.any.and_()

    def test_chains(self):
        matcher = create_matcher(1).or_(2).or_(3)

        assert matcher.test(3) is True
        assert matcher.message == 'match(1).or(match(2)).or(match(3))'

    @pytest.mark.parametrize('value', [0, 1, 'a', '', None, [], [1], {'a': 1}])
    def test_laws(self, value):
        matchers = [match.truthy, match.number, match('a'), match({'a': 1}), match.array]

        for m1 in matchers:
            for m2 in matchers:
                assert bool(m1.or_(m2).test(value)) == bool(m1.test(value) or m2.test(value))
                assert bool(m1.and_(m2).test(value)) == bool(m1.test(value) and m2.test(value))
                for m3 in matchers:
                    assert bool(m1.or_(m2).or_(m3).test(value)) == bool(m1.or_(m2.or_(m3)).test(value))
                    assert bool(m1.and_(m2).and_(m3).test(value)) == bool(m1.and_(m2.and_(m3)).test(value))


class TestMatchObject:
    def test_extra_keys_ignored(self):
        assert match_object({'a': 1, 'b': 2}, {'a': 1}) is True

    def test_empty_expectation(self):
        assert match_object({'a': 1}, {}) is True

    def test_missing_actual(self):
        assert match_object(None, {}) is False
