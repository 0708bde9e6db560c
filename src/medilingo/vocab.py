"""Static vocabulary: prescription shorthand and the Taglish lexicon.

Both tables are read-only after import. Keys are lowercase because the
normalizer lowercases everything before lookup.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

ABBREVIATIONS: Mapping[str, str] = MappingProxyType({
    "bid": "twice a day",
    "tid": "three times a day",
    "qid": "four times a day",
    "q.d.": "every day",
    "qd": "every day",
    "q4h": "every 4 hours",
    "q6h": "every 6 hours",
    "q8h": "every 8 hours",
    "prn": "as needed",
    "ac": "before meals",
    "pc": "after meals",
    "hs": "at bedtime",
    "stat": "immediately",
    "qam": "in the morning",
    "qpm": "at night",
    "po": "by mouth",
    "npo": "nothing by mouth",
})

TRANSLATIONS: Mapping[str, str] = MappingProxyType({
    # routes
    "take": "uminom",
    "apply": "ipahid",
    "consume": "kainin",
    "administer": "ibigay",
    "use": "gamitin",
    "insert": "ipasok",
    "swallow": "lunukin",
    "inhale": "langhapin",
    # quantities
    "a": "isang", "an": "isang", "one": "isang", "1": "isang",
    "two": "dalawang", "2": "dalawang",
    "three": "tatlong", "3": "tatlong",
    "four": "apat na", "4": "apat na",
    "five": "limang", "5": "limang",
    "six": "anim na", "6": "anim na",
    "seven": "pitong", "7": "pitong",
    "eight": "walong", "8": "walong",
    "nine": "siyam na", "9": "siyam na",
    "ten": "sampung", "10": "sampung",
    "half": "kalahating",
    # units
    "tablet": "tableta",
    "capsule": "kapsula",
    "pill": "tableta",
    "ml": "ml",
    "milliliter": "milliliter",
    "tablespoon": "kutsara",
    "teaspoon": "kutsarita",
    "drop": "patak",
    "spray": "isprey",
    "puff": "puff",
    "application": "aplikasyon",
    "lozenge": "lozenge",
    "patch": "patch",
    "sachet": "sachet",
    "unit": "yunit",
    "mcg": "micrograms",
    "mg": "milligrams",
    # fixed frequency phrases
    "daily": "araw-araw",
    "once a day": "isang beses sa isang araw",
    "twice a day": "dalawang beses sa isang araw",
    "three times a day": "tatlong beses sa isang araw",
    "four times a day": "apat na beses sa isang araw",
    "as needed": "kung kinakailangan",
    "before meals": "bago kumain",
    "after meals": "pagkatapos kumain",
    "with meals": "kasabay ng pagkain",
    "at bedtime": "bago matulog",
    "in the morning": "sa umaga",
    "in the afternoon": "sa hapon",
    "at night": "sa gabi",
    "immediately": "ngayon na",
    "every other day": "tuwing makalawa",
    "twice weekly": "dalawang beses sa isang linggo",
    "for seven days": "sa loob ng pitong araw",
    # pieces of "every N <period>" intervals
    "every": "bawat",
    "hours": "oras", "hour": "oras",
    "days": "na araw", "day": "araw",
    "weeks": "na linggo", "week": "linggo",
    "months": "na buwan", "month": "buwan",
    # connectives
    "of": "ng",
    "and": "at",
    "then": "pagkatapos",
})
