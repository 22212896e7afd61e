# -*- coding: utf-8 -*-

import random

import pytest

from domainerator.errors import EmptyWordListError, NoDomainsError
from domainerator.generator import (CombineOptions, DomainGenerator, combine,
                                    combine_phrase_and_public_suffixes, combine_prefix_and_suffix,
                                    filter_max_length, filter_prohibited, fuse_words)

PREFIXES = ["go", "py"]
SUFFIXES = ["lang", "coder"]
PSL = ["com", "er"]


def test_single_pair_without_options():
    assert combine(["go"], ["lang"], ["com"]) == ["golang.com"]


def test_single_pair_hyphenated():
    domains = combine(["go"], ["lang"], ["com"], CombineOptions(hyphenate=True))
    assert set(domains) == {"golang.com", "go-lang.com"}


def test_combine_simple():
    expected = sorted([
        "golang.com", "golang.er", "gocoder.com", "gocoder.er",
        "pylang.com", "pylang.er", "pycoder.com", "pycoder.er",
    ])
    assert combine(PREFIXES, SUFFIXES, PSL) == expected


def test_combine_hyphenation():
    expected = sorted([
        "golang.com", "golang.er", "gocoder.com", "gocoder.er",
        "go-lang.com", "go-lang.er", "go-coder.com", "go-coder.er",
        "pylang.com", "pylang.er", "pycoder.com", "pycoder.er",
        "py-lang.com", "py-lang.er", "py-coder.com", "py-coder.er",
    ])
    assert combine(PREFIXES, SUFFIXES, PSL, CombineOptions(hyphenate=True)) == expected


def test_combine_full():
    expected = sorted([
        "go.com", "go.er", "lang.com", "lang.er",
        "golang.com", "golang.er", "go-lang.com", "go-lang.er",
        "gocoder.com", "gocoder.er", "gocod.er", "go-coder.com", "go-coder.er", "go-cod.er",
        "py.com", "py.er", "coder.com", "coder.er", "cod.er",
        "pylang.com", "pylang.er", "py-lang.com", "py-lang.er",
        "pycoder.com", "pycoder.er", "pycod.er", "py-coder.com", "py-coder.er", "py-cod.er",
    ])
    options = CombineOptions(include_single_words=True, hyphenate=True,
                             include_self_pairing=True, domain_hacks=True, strict=False)
    assert combine(PREFIXES, SUFFIXES, PSL, options) == expected


def test_combine_phrase_and_public_suffixes_with_hacks():
    domains = combine_phrase_and_public_suffixes("index", ["ex", "nd", "com"], True)
    assert domains == ["index.ex", "ind.ex", "index.nd", "index.com"]


def test_hack_needs_non_empty_label():
    assert combine_phrase_and_public_suffixes("ex", ["ex"], True) == ["ex.ex"]


def test_domain_hack_requires_suffix_match():
    # "ex" appears inside "rexcel" but not at the end, so no truncation
    assert combine_phrase_and_public_suffixes("rexcel", ["ex"], True) == ["rexcel.ex"]


def test_hack_skips_label_ending_with_hyphen():
    assert combine_phrase_and_public_suffixes("go-er", ["er"], True) == ["go-er.er"]


def test_hacked_label_respects_min_length():
    options = CombineOptions(domain_hacks=True, min_label_length=4)
    assert combine(["ab"], ["er"], ["er"], options) == ["aber.er"]


def test_combine_prefix_and_suffix():
    assert sorted(combine_prefix_and_suffix("prefix", "suffix", False, True)) == \
        ["prefix-suffix", "prefixsuffix"]
    assert combine_prefix_and_suffix("prefix", "suffix", False, False) == ["prefixsuffix"]


def test_combine_prefix_and_suffix_with_itself():
    assert combine_prefix_and_suffix("itself", "itself", False, True) == []
    assert sorted(combine_prefix_and_suffix("itself", "itself", True, True)) == \
        ["itself-itself", "itselfitself"]


def test_self_pairing_option():
    assert combine(["go"], ["go", "lang"], ["com"]) == ["golang.com"]
    options = CombineOptions(include_self_pairing=True)
    assert combine(["go"], ["go", "lang"], ["com"], options) == ["gogo.com", "golang.com"]


def test_fuse_words():
    assert fuse_words("soft", "tea") == ["softea"]
    assert fuse_words("data", "table") == ["datable"]
    assert fuse_words("go", "lang") == []
    assert fuse_words("a", "ab") == []


def test_combine_with_fuse():
    options = CombineOptions(fuse=True)
    assert combine(["soft"], ["tea"], ["com"], options) == ["softea.com", "softtea.com"]


def test_min_label_length_applies_to_pairs_only():
    assert combine(["a", "bb"], ["c", "dd"], ["com"]) == ["add.com", "bbc.com", "bbdd.com"]

    options = CombineOptions(include_single_words=True)
    domains = combine(["a", "bb"], ["c", "dd"], ["com"], options)
    assert "a.com" in domains
    assert "ac.com" not in domains


def test_max_length_counts_characters():
    options = CombineOptions(max_domain_length=10)
    assert combine(["go", "longword"], ["lang"], ["com"], options) == ["golang.com"]

    options = CombineOptions(max_domain_length=11, allow_utf8=True)
    assert combine(["café"], ["bar"], ["com"], options) == ["cafébar.com"]


def test_non_ascii_filtered_by_default():
    assert combine(["café", "tea"], ["bar"], ["com"]) == ["teabar.com"]


def test_strict_filters_prohibited_labels():
    options = CombineOptions(include_single_words=True)
    assert combine(["com"], ["net"], ["com"], options) == ["comnet.com"]

    options = CombineOptions(include_single_words=True, strict=False)
    assert combine(["com"], ["net"], ["com"], options) == ["com.com", "comnet.com", "net.com"]


def test_empty_word_lists():
    with pytest.raises(EmptyWordListError):
        combine([], [], ["com"])


def test_no_domains_after_filtering():
    with pytest.raises(NoDomainsError):
        combine(["a"], ["b"], ["com"])


def test_filters():
    assert filter_max_length(["abc.com", "abcdef.com"], 7) == ["abc.com"]
    assert filter_prohibited(["com.net", "golang.com"], {"com": True}) == ["golang.com"]


WORDS = ["go", "lang", "data", "table", "soft", "tea", "coder", "index", "web", "net"]
PSLS = ["com", "co.uk", "er", "ex", "io", "net"]


def _all_options():
    options = CombineOptions(include_single_words=True, hyphenate=True, include_self_pairing=True,
                             domain_hacks=True, fuse=True, max_domain_length=12)
    return combine(WORDS, WORDS, PSLS, options)


def test_output_invariants_with_all_options():
    domains = _all_options()

    assert len(domains) == len(set(domains))
    assert domains == sorted(domains)
    assert all(len(domain) <= 12 for domain in domains)


def test_output_is_deterministic():
    expected = _all_options()
    shuffled = WORDS[:]
    random.Random(7).shuffle(shuffled)
    options = CombineOptions(include_single_words=True, hyphenate=True, include_self_pairing=True,
                             domain_hacks=True, fuse=True, max_domain_length=12)
    assert combine(shuffled, list(reversed(shuffled)), list(reversed(PSLS)), options) == expected


def test_no_hyphens_without_hyphenate():
    options = CombineOptions(include_single_words=True, domain_hacks=True, fuse=True)
    assert not any("-" in domain for domain in combine(WORDS, WORDS, PSLS, options))


def test_min_label_length_without_single_words():
    options = CombineOptions(domain_hacks=True, fuse=True, min_label_length=6)
    domains = combine(WORDS, WORDS, PSLS, options)
    assert all(len(domain.split(".", 1)[0]) >= 6 for domain in domains)


def test_no_self_pairs_without_itself():
    domains = combine(WORDS, WORDS, ["com"])
    assert not any(domain == f"{word}{word}.com" for word in WORDS for domain in domains)


def test_domain_generator_uses_options():
    generator = DomainGenerator(CombineOptions(hyphenate=True))
    assert generator.generate(["go"], ["lang"], ["com"]) == ["go-lang.com", "golang.com"]
