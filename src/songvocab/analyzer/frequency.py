"""Word commonness tiers for difficulty scoring.

The built-in table is a small approximation of English frequency bands,
weighted toward vocabulary that shows up in song lyrics. Tier 1 holds the
most frequent words, tier 4 the least frequent words the table knows about.
Anything absent from the table is tier 5: the table has to vouch for a word
being common, otherwise it is treated as rare.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Final, Protocol

MOST_COMMON_TIER: Final[int] = 1
UNKNOWN_TIER: Final[int] = 5

TIER_1_WORDS: Final[frozenset[str]] = frozenset(
    """
    the be to of and a in that have i it for not on with he as you do at
    this but his by from they we say her she or an will my one all would
    there their what so up out if about who get which go me when make can
    like time no just him know take people into year your good some could
    them see other than then now look only come its over think also back
    after use two how our work first well way even new want because any
    these give day most us is are was were been has had did said says got
    love baby yeah oh feel heart night life man girl never down here let
    tell more need away far long still every world right little old hand
    home eyes light live call keep find thing things much too very again
    where why always something nothing around really ever yes okay hey
    more many same last next big small great high own place part under
    while should must might may three four five each both those through
    before between off too mean word words song sing music play stay
    girl boy friend mother father school house car city name thing head
    face door room water money food sun moon sky road way end best bad
    made make making goes going went gone come came coming know knew known
    think thought see saw seen take took taken give gave given say said
    tell told feel felt keep kept leave left run ran walk talk
    """.split()
)

TIER_2_WORDS: Final[frozenset[str]] = frozenset(
    """
    believe seemed seem seems hold held wait wish hope dream dreams fall
    fell turn turned open close cry cried smile laugh dance dancing
    stand stood shine burn fire rain snow wind star stars ocean river
    street town morning evening tonight today tomorrow forever together
    alone another enough until without inside outside above below behind
    beautiful pretty happy sad lonely young free true real wrong sure
    sweet cold warm hot dark bright blue red black white green gold
    kiss touch hurt break broken remember forget forgot lose lost win
    change changed start started stop try tried trying feeling feelings
    body soul mind eye arms hands lips voice kind heartbeat goodbye hello
    sorry please thank tears heaven hell god lord angel king queen
    summer winter spring fly flying ride drive road train home hear
    heard listen learn understand answer question moment minute second
    hour week month story reason chance trouble problem promise secret
    future past memory memories world everyone everything someone
    anything anyone nobody somebody somewhere nowhere maybe sometimes
    almost already always often later soon early late slow fast quiet
    loud strong weak hard easy simple clear ready lucky crazy wild
    """.split()
)

TIER_3_WORDS: Final[frozenset[str]] = frozenset(
    """
    yesterday suddenly shadow happiness sorrow lover strangers stranger
    freedom wonder wondering dreaming shelter silence silent whisper
    thunder lightning storm midnight sunrise sunset horizon desert
    mountain valley island harbor journey distance highway border
    gentle tender bitter restless endless careless reckless honest
    desire passion pride shame faith trust truth lies lie liar fool
    foolish guilty innocent danger dangerous perfect certain strange
    wonderful terrible awful precious empty hollow heavy fragile
    brave proud crown throne kingdom soldier battle war peace glory
    regret mercy grace prayer pray blessing church chapel wedding
    diamond silver velvet satin candle mirror window ceiling pillow
    garden flower flowers roses rose petal leaves autumn season
    shoulder finger fingers skin bone blood breath breathe breathing
    whispered wandering fading falling burning shining crying dying
    remind reminded belong belonged pretend pretended escape chase
    """.split()
)

TIER_4_WORDS: Final[frozenset[str]] = frozenset(
    """
    wander whisper destiny echo echoes linger lingering yearning yearn
    solace serenade lullaby melody harmony symphony ballad anthem
    wanderer drifter vagabond outlaw pilgrim prophet saint sinner
    twilight dusk dawn haze mist fog ember embers ashes cinders
    shattered scattered tangled tattered faded hallowed sacred
    reverie rapture euphoria despair anguish torment longing
    crimson scarlet amber ivory ebony indigo
    betray betrayal surrender redemption salvation temptation
    oblivion eternity infinity horizon
    """.split()
)

DEFAULT_TIERS: Final[Mapping[int, frozenset[str]]] = MappingProxyType(
    {
        1: TIER_1_WORDS,
        2: TIER_2_WORDS,
        3: TIER_3_WORDS,
        4: TIER_4_WORDS,
    }
)


class FrequencyClassifier(Protocol):
    """Anything that can rank a canonical word from 1 (common) to 5 (rare)."""

    def tier(self, word: str) -> int: ...


class StaticFrequencyTable:
    """Fixed, read-only word-to-tier lookup.

    A word listed in several tiers keeps the most common one.
    """

    def __init__(self, tiers: Mapping[int, Iterable[str]] | None = None) -> None:
        """Build the lookup.

        Args:
            tiers: Mapping of tier (1-4) to the words in it. Uses the
                built-in lyric-oriented table if None.

        Raises:
            ValueError: If a tier outside 1-4 is given.
        """
        if tiers is None:
            tiers = DEFAULT_TIERS

        lookup: dict[str, int] = {}
        for tier in sorted(tiers):
            if not MOST_COMMON_TIER <= tier < UNKNOWN_TIER:
                raise ValueError(
                    f"Explicit tiers must be between {MOST_COMMON_TIER} and "
                    f"{UNKNOWN_TIER - 1}, got {tier}"
                )
            for word in tiers[tier]:
                lookup.setdefault(word.lower(), tier)

        self._lookup: Mapping[str, int] = MappingProxyType(lookup)

    def __len__(self) -> int:
        return len(self._lookup)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def tier(self, word: str) -> int:
        """Return the word's tier, or UNKNOWN_TIER when it is not listed."""
        return self._lookup.get(word, UNKNOWN_TIER)


DEFAULT_FREQUENCY_TABLE: Final[StaticFrequencyTable] = StaticFrequencyTable()


def get_frequency_tier(word: str, classifier: FrequencyClassifier | None = None) -> int:
    """Look up the commonness tier of a canonical word.

    Args:
        word: Canonical (lowercase, trimmed) word.
        classifier: Tier source (uses the built-in table if None).

    Returns:
        Tier from 1 (most common) to 5 (rare or unknown).
    """
    if classifier is None:
        classifier = DEFAULT_FREQUENCY_TABLE
    return classifier.tier(word)
