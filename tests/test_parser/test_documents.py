"""Tests for @-moz-document rule extraction."""

import pytest

from usercss.model import DocumentRule, RuleKind
from usercss.parser import parse_document_rules
from usercss.parser.documents import strip_block_open


# ---------------------------------------------------------------------------
# Predicate keywords
# ---------------------------------------------------------------------------


class TestKeywords:
    @pytest.mark.parametrize(
        "tail, kind, value",
        [
            ("domain(example.com)", RuleKind.DOMAIN, "example.com"),
            ("url(https://example.com/test)", RuleKind.URL, "https://example.com/test"),
            ('url-prefix("https://example.com/")', RuleKind.URL_PREFIX, "https://example.com/"),
            ("regexp('.*')", RuleKind.REGEXP, ".*"),
        ],
    )
    def test_single_predicate(self, tail, kind, value):
        assert parse_document_rules(tail) == [DocumentRule(kind=kind, value=value)]

    def test_unknown_predicate_is_ignored(self):
        rules = parse_document_rules("media-document(foo), domain('a.com')")
        assert rules == [DocumentRule(RuleKind.DOMAIN, "a.com")]

    def test_keyword_must_stand_alone(self):
        assert parse_document_rules("myurl(x)") == []

    def test_empty_tail(self):
        assert parse_document_rules("") == []


# ---------------------------------------------------------------------------
# Quoting
# ---------------------------------------------------------------------------


class TestQuoting:
    def test_double_quotes_stripped(self):
        (rule,) = parse_document_rules('domain("example.com")')
        assert rule.value == "example.com"

    def test_single_quotes_stripped(self):
        (rule,) = parse_document_rules("domain('example.com')")
        assert rule.value == "example.com"

    def test_unquoted_kept_verbatim(self):
        (rule,) = parse_document_rules("url(https://example.com/?a=1&b=2)")
        assert rule.value == "https://example.com/?a=1&b=2"


# ---------------------------------------------------------------------------
# Multiple predicates and argument boundaries
# ---------------------------------------------------------------------------


class TestBoundaries:
    def test_two_domains_in_order(self):
        rules = parse_document_rules("domain('example.com'), domain('example.org')")
        assert rules == [
            DocumentRule(RuleKind.DOMAIN, "example.com"),
            DocumentRule(RuleKind.DOMAIN, "example.org"),
        ]

    def test_mixed_predicates_without_space_after_comma(self):
        rules = parse_document_rules('domain("a.com"),url-prefix("http://x")')
        assert rules == [
            DocumentRule(RuleKind.DOMAIN, "a.com"),
            DocumentRule(RuleKind.URL_PREFIX, "http://x"),
        ]

    def test_regexp_keeps_inner_parens(self):
        tail = r"regexp(^https?://(.+\.example\.org)/[a-z]{8,16}$)"
        (rule,) = parse_document_rules(tail)
        assert rule.kind is RuleKind.REGEXP
        assert rule.value == r"^https?://(.+\.example\.org)/[a-z]{8,16}$"

    def test_comma_inside_argument(self):
        rules = parse_document_rules("url(https://x.org/a,b), domain(y.org)")
        assert rules == [
            DocumentRule(RuleKind.URL, "https://x.org/a,b"),
            DocumentRule(RuleKind.DOMAIN, "y.org"),
        ]

    def test_comma_inside_quoted_argument(self):
        (rule,) = parse_document_rules("regexp('a,b')")
        assert rule.value == "a,b"

    def test_inline_block_after_last_predicate(self):
        rules = parse_document_rules("domain(a.com) { :root {} }")
        assert rules == [DocumentRule(RuleKind.DOMAIN, "a.com")]

    def test_inline_block_without_space(self):
        rules = parse_document_rules('domain("a.com"){ body { color: red } }')
        assert rules == [DocumentRule(RuleKind.DOMAIN, "a.com")]

    def test_regexp_group_followed_by_comma(self):
        (rule,) = parse_document_rules(r"regexp(^https://(a|b),c\.org/$)")
        assert rule.value == r"^https://(a|b),c\.org/$"

    def test_regexp_group_with_quantifier(self):
        (rule,) = parse_document_rules(r"regexp(^https://(ab){2}\.org/$)")
        assert rule.value == r"^https://(ab){2}\.org/$"

    def test_regexp_group_then_next_predicate(self):
        rules = parse_document_rules(r"regexp(^https://(a|b)\.org/$), domain(c.org)")
        assert rules == [
            DocumentRule(RuleKind.REGEXP, r"^https://(a|b)\.org/$"),
            DocumentRule(RuleKind.DOMAIN, "c.org"),
        ]

    def test_unknown_predicate_after_comma(self):
        rules = parse_document_rules("domain(a.com), media-document(x)")
        assert rules == [DocumentRule(RuleKind.DOMAIN, "a.com")]


class TestStripBlockOpen:
    def test_strips_brace_and_space(self):
        assert strip_block_open("domain(a.com)   {") == "domain(a.com)"

    def test_strips_brace_without_space(self):
        assert strip_block_open("domain(a.com){") == "domain(a.com)"

    def test_leaves_other_text(self):
        assert strip_block_open("domain(a.com)") == "domain(a.com)"
