#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
hawaiian_sayings.py
-------------------

A small dictionary of Hawaiian proverbs stored in an :class:`OrderedMap`.

Each entry maps the saying itself to a :class:`Saying` record holding its
English translation and an explanation in English and Hawaiian.  The entries
come from Mary Kawena Pukui, *ʻŌlelo Noʻeau: Hawaiian Proverbs & Poetical
Sayings*, Bishop Museum Press, 1983; ``Saying.page`` keeps the page number.

Typical usage
~~~~~~~~~~~~~
>>> from hawaiian_sayings import load_dictionary
>>> sayings = load_dictionary()
>>> sayings.first()
"'A'ahu 'ili kao"
>>> sayings.successor("Ka'a ka pōhaku.")
"La'i lua ke kai."
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ordered_map import DuplicatePolicy, OrderedMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Explanation:
    english: str
    hawaiian: str


@dataclass(frozen=True)
class Saying:
    """Value stored for each proverb; ``translation`` is the searchable text."""

    translation: str
    explanation: Explanation
    page: Optional[int] = None


def _saying(
    translation: str, english: str, hawaiian: str, page: int
) -> Saying:
    return Saying(translation, Explanation(english, hawaiian), page)


SAYINGS: Tuple[Tuple[str, Saying], ...] = (
    (
        "'A'ahu 'ili kao",
        _saying(
            "Wearer of goat hide",
            "An expression of contempt for a person who is so lazy he uses goat "
            "hides instead of mats, which require work to make, for his bedding. "
            "Such a person is recognized by his goaty odor.",
            "He hoike hoowahawaha i ke kanakaʻO ka mea palaualelo, hoʻohana ʻo ia "
            "i ka ʻili kaoma kahi o ka moena e pono ai ka hanae hana, no kona wahi "
            "moe. ʻO ia ʻano aʻike ʻia ke kanaka e kona ʻala kao.",
            3,
        ),
    ),
    (
        "A 'ai ka manu i luna.",
        _saying(
            "The birds feed above.",
            "An attractive person is compared to a flower-laden tree that "
            "attracts birds.",
            "Hoʻohālikelike ʻia ke kanaka uʻi me a lāʻau pua e hoʻohihi manu.",
            3,
        ),
    ),
    (
        "E 'ai i ka mea i loa'a.",
        _saying(
            "What you have, eat.",
            "Be satisfied with what you have.",
            "E māʻona i kāu mea i loaʻa.",
            31,
        ),
    ),
    (
        "E ala, e hoa i ka malo.",
        _saying(
            "Get up and gird your loincloth.",
            "A call to rise and get to work.",
            "He kāhea e ala a hele i ka hana.",
            32,
        ),
    ),
    (
        "Ha'alele 'ia i muhwa'a.",
        _saying(
            "Left on the very last canoe.",
            "Said of one who is left behind.",
            "Wahi a kekahi i waiho ʻia.",
            49,
        ),
    ),
    (
        "Ha'alele o Makanikeoe.",
        _saying(
            "Makanikeoe has departed.",
            "Peace and love are no longer here.",
            "ʻAʻohe maluhia a me ke aloha.",
            50,
        ),
    ),
    (
        "I hele no ka hola i'a i ka lā.",
        _saying(
            "Poison fish while it is day.",
            "It is better to work during the day.",
            "ʻOi aku ka maikaʻi o ka hana i ka lā.",
            126,
        ),
    ),
    (
        "Ihea no ka lima a 'au mai?",
        _saying(
            "Where are the arms with which to swim?",
            "Don't complain, use your limbs to do what you need to do.",
            "Mai ʻōhumu, e hoʻohana i kou mau lālā e hana i kāu mea e pono ai "
            "ke hana.",
            126,
        ),
    ),
    (
        "Ka 'ai niho 'ole a ka makani i ka 'ai.",
        _saying(
            "Even without teeth the wind consumes the food crops.",
            "Said of a destructive windstorm.",
            "Ua ʻōlelo ʻia no ka makani ʻino.",
            139,
        ),
    ),
    (
        "Ka'a ka pōhaku.",
        _saying("The stones roll.", "Thunder.", "Hekili.", 140),
    ),
    (
        "Lāhui pua o lalo.",
        _saying(
            "The many flowers below.",
            "The commoners.",
            "ʻO nā makaʻāinana.",
            209,
        ),
    ),
    (
        "La'i lua ke kai.",
        _saying(
            "The sea is very calm.",
            "All is peaceful.",
            "Ua maluhia nā mea a pau.",
            209,
        ),
    ),
    (
        "Māhanalua na kukui.",
        _saying(
            "The lights are doubled.",
            "Said of a drunk person who sees double.",
            "Wahi a kekahi kanaka ʻona ʻike pālua.",
            221,
        ),
    ),
    (
        "Mai ka ā a ka w.",
        _saying(
            "From A to W.",
            "The alphabet of Hawaiian.",
            "ʻO ka pīʻāpā o ka ʻōlelo Hawaiʻi.",
            223,
        ),
    ),
    (
        "Nahā ka mākāhā, lele ka 'upena.",
        _saying(
            "When the sluice gate breaks, the fishnets are lowerd. ",
            "One's loss may be another's gain.",
            "ʻO ka lilo o kekahi, ʻo ia ka waiwai o kekahi.",
            242,
        ),
    ),
    (
        "Na kai 'ewalu.",
        _saying(
            "The eight seas.",
            'The "seas" that divide the eight inhabited islands.',
            'ʻO nā "kai" e māhele ana i ka ʻewalu mokupuni kanaka.',
            243,
        ),
    ),
    (
        "'Ohi aku ka pō a koe kêia.",
        _saying(
            "The night has taken all but this one.",
            "All are dead; this is the only survivor.",
            "Ua make nā mea a pau; ʻo kēia wale nō ke ola.",
            258,
        ),
    ),
    (
        "'Ōhule ke po'o i niania.",
        _saying(
            "Bald of head and smooth.",
            "Said of a bald-headed man.",
            "Wahi a kekahi kanaka ʻōhule.",
            260,
        ),
    ),
    (
        "Pa'a ka moku i ka helēuma.",
        _saying(
            "The ship is heldfast by the anchor.",
            "Said of one who is married.",
            "Wahi a kekahi i male.",
            281,
        ),
    ),
    (
        "Pa'a no ka 'aihue i ka 'ole",
        _saying(
            "A thief persists in denying his guilt.",
            "A thief is also a liar.",
            "He wahahee ka aihue.",
            282,
        ),
    ),
)


def _translation(saying: Saying) -> str:
    return saying.translation


def load_dictionary(
    entries: Iterable[Tuple[str, Saying]] = SAYINGS,
    *,
    on_duplicate: DuplicatePolicy = DuplicatePolicy.REJECT,
) -> OrderedMap[str, Saying]:
    """
    Build a fresh dictionary of sayings.

    Parameters
    ----------
    entries : iterable of (saying, Saying)
        Defaults to the bundled :data:`SAYINGS`.
    on_duplicate : DuplicatePolicy
        Passed to the map; with the default a repeated saying raises
        ``DuplicateKeyError``.
    """
    dictionary: OrderedMap[str, Saying] = OrderedMap(
        entries, value_text=_translation, on_duplicate=on_duplicate
    )
    logger.info("Loaded %d sayings", len(dictionary))
    return dictionary


def sayings_containing(dictionary: OrderedMap[str, Saying], word: str) -> List[str]:
    """Sayings whose Hawaiian text contains *word*."""
    return dictionary.search_by_key_substring(word)


def sayings_translated_with(
    dictionary: OrderedMap[str, Saying], word: str
) -> List[str]:
    """Sayings whose English translation contains *word*."""
    return dictionary.search_by_value_substring(word)
