#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: languages.py
# Author: Wadih Khairallah
# Description: Per-language rule tables for phrase extraction
# Created: 2026-10-12 09:14:31
# Modified: 2026-10-18 17:02:45

import re
import unicodedata
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Pattern, Tuple

# Word characters, including the combining marks produced by NFD.
WORD_CHAR = r"[\w\u0300-\u036f]"

_NEVER = re.compile(r"(?!x)x")


def _nfd(s: str) -> str:
    return unicodedata.normalize("NFD", s)


def _words(blob: str) -> FrozenSet[str]:
    return frozenset(_nfd(w) for w in blob.split())


def _anchored(*words: str) -> Pattern:
    """Case-insensitive whole-token matcher for a list of words."""
    if not words:
        return _NEVER
    alternation = "|".join(re.escape(_nfd(w)) for w in words)
    return re.compile(rf"^(?:{alternation})$", re.IGNORECASE)


def contraction_pattern(contraction: str) -> str:
    """
    Build the search pattern for a contraction key.

    Keys without an apostrophe are whole words ("al", "do"). Keys ending in
    an apostrophe are elided prefixes ("dell'", "qu'") and must start a word.
    Keys ending in a word character ("n't", "'s") are suffixes and must end one.

    Args:
        contraction (str): Contraction key from a rule table.

    Returns:
        str: Regular expression source.
    """
    body = re.escape(_nfd(contraction))
    if "'" not in contraction:
        return rf"(?<!{WORD_CHAR}){body}(?!{WORD_CHAR})"
    if contraction.endswith("'"):
        return rf"(?<!{WORD_CHAR}){body}"
    return rf"{body}(?!{WORD_CHAR})"


@dataclass(frozen=True)
class LanguageRules:
    code: str
    name: str
    stop_words: FrozenSet[str]
    articles: Pattern
    valid_single_letters: FrozenSet[str]
    common_phrase_endings: Pattern
    invalid_starters: Pattern
    contractions: Tuple[Tuple[str, str], ...]
    compound_joiner: Optional[Pattern]
    word_frequencies: Dict[str, float]
    multi_word_stops: FrozenSet[str]
    signature: Pattern
    signature_weight: float = 2.0

    def is_stop_word(self, word: str, case_sensitive: bool = False) -> bool:
        return (word if case_sensitive else word.lower()) in self.stop_words

    def is_valid_single_letter(self, word: str) -> bool:
        return len(word) == 1 and word.lower() in self.valid_single_letters


_SPANISH = LanguageRules(
    code="es",
    name="Spanish",
    stop_words=_words("""
        a al algo algunas algunos ante antes como con contra cual cuando de del
        desde donde durante e el ella ellas ellos en entre era erais eran eras eres
        es esa esas ese eso esos esta estaba estado estais estamos estan estar
        estas este esto estos estoy etc fue fueron fui fuimos ha habeis haber habia
        habias han has hasta hay he hemos hube hubo la las le les lo los mas me mi
        mia mias mientras mio mios mis mucho muchos muy nada ni no nos nosotras
        nosotros nuestra nuestras nuestro nuestros o os otra otras otro otros para
        pero por porque que quien quienes qué se sea seais semos ser si sido
        siendo sin sobre sois somos son soy su sus suya suyas suyo suyos sí
        también tanto te teneis tenemos tener tengo ti tiene tienen todo todos tu
        tus tuya tuyas tuyo tuyos tú un una uno unos vosotras vosotros vuestra
        vuestras vuestro vuestros y ya yo él ésta éstas éste éstos
    """),
    articles=_anchored("el", "la", "los", "las", "un", "una", "unos", "unas"),
    valid_single_letters=frozenset("yaeou"),
    common_phrase_endings=_anchored("es", "está", "son", "fueron", "ser", "estar"),
    invalid_starters=_anchored("y", "o", "pero", "porque", "que", "si", "no", "al", "del"),
    contractions=(
        ("al", "a el"),
        ("del", "de el"),
        ("desde", "de desde"),
        ("hasta", "ha hasta"),
    ),
    compound_joiner=None,
    word_frequencies={"de": 10, "la": 8, "que": 7, "el": 6, "en": 5},
    multi_word_stops=frozenset(["de la", "en el", "que es"]),
    signature=re.compile(r"[áéíóúñ¿¡]", re.IGNORECASE),
)

_ITALIAN = LanguageRules(
    code="it",
    name="Italian",
    stop_words=_words("""
        a ad al alla alle allo anche avere aveva avevano ben buono che chi cinque
        comprare con cosa cui da dal dalla dalle dallo dei del della delle dello
        dentro deve devo di doppio due e ecco fare fine fino fra gente giu ha hai
        hanno ho il indietro invece io la lavoro le lei lo loro lui lungo ma me
        meglio molta molti molto nei nella no noi nome nostro nove nuovi nuovo o
        oltre ora otto peggio per perche più poco primo qua quarto quasi quattro
        quello questo qui quindi quinto rispetto sara secondo sei sembra sembrava
        senza sette sia siamo siete solo sono sopra soprattutto sotto stati stato
        stesso su sua sue sui sul sulla sulle sullo suo suoi tale tanto te tempo
        terzo tra tre triplo ultimo un una uno va vai voi volte vostro
    """),
    articles=_anchored("il", "lo", "la", "i", "gli", "le", "un", "uno", "una"),
    valid_single_letters=frozenset("aei"),
    common_phrase_endings=_anchored("è", "sono", "era", "erano", "essere", "stato", "stata"),
    invalid_starters=_anchored("e", "o", "ma", "perche", "che", "se", "non", "di", "da"),
    contractions=(
        ("dell'", "de la "),
        ("nell'", "ne la "),
        ("all'", "a la "),
        ("dall'", "da la "),
        ("sull'", "su la "),
    ),
    compound_joiner=None,
    word_frequencies={"di": 10, "il": 8, "che": 7, "la": 6, "per": 5, "un": 5, "è": 4},
    multi_word_stops=frozenset(["di il", "di la", "per il", "per la"]),
    signature=re.compile(r"[àèéìòù]", re.IGNORECASE),
)

_PORTUGUESE = LanguageRules(
    code="pt",
    name="Portuguese",
    stop_words=_words("""
        a ao aos aquela aquelas aquele aqueles aquilo as até com como da das de
        dela delas dele deles depois do dos e é ela elas ele eles em entre era
        eram essa essas esse esses esta estas este estes eu foi fomos for foram ha
        havia isso isto já la lhe lhes lo mais mas me mesmo meu meus minha minhas
        muito na nas nem no nos nós nossa nossas nosso nossos num numa não o os
        ou para pela pelas pelo pelos por qual quando que quem se sem seu seus só
        sua suas também te tem temos tenho ter teu teus ti tido tinha tinham toda
        todas todo todos tu tua tuas tudo um uma umas uns vos vós vossa vossas
        vosso vossos
    """),
    articles=_anchored("o", "a", "os", "as", "um", "uma", "uns", "umas"),
    valid_single_letters=frozenset("aeo"),
    common_phrase_endings=_anchored("é", "são", "era", "eram", "ser", "estar", "sido"),
    invalid_starters=_anchored("e", "o", "mas", "porque", "que", "se", "não", "de", "da", "do"),
    contractions=(
        ("do", "de o"),
        ("da", "de a"),
        ("dos", "de os"),
        ("das", "de as"),
        ("no", "em o"),
        ("na", "em a"),
        ("ao", "a o"),
        ("à", "a a"),
    ),
    compound_joiner=None,
    word_frequencies={"de": 10, "o": 8, "que": 7, "a": 6, "e": 6, "para": 5, "em": 5},
    multi_word_stops=frozenset(["de o", "de a", "para o", "para a"]),
    signature=re.compile(r"[ãõçáéíóúâêôàü]", re.IGNORECASE),
)

_DUTCH = LanguageRules(
    code="nl",
    name="Dutch",
    stop_words=_words("""
        aan af al als bij dan dat de der deze die dit door een en er ge geen haar
        had hebben heeft hem het hij hoe hun ik in is je kan me meer men met mij
        mijn moet na naar niet nog nu of om omdat ons onze ook op over reeds te
        tegen toch toen tot u uit uw van veel voor want waren was wat we wel werd
        wezen wie wij wil worden wordt zal ze zei zelf zich zij zijn zo zonder zou
    """),
    articles=_anchored("de", "het", "een"),
    valid_single_letters=frozenset("u"),
    common_phrase_endings=_anchored("is", "zijn", "was", "waren", "worden", "geweest"),
    invalid_starters=_anchored("en", "of", "maar", "omdat", "dat", "als", "niet", "van", "voor"),
    contractions=(
        ("'t", "het"),
        ("'s", "des"),
        ("'n", "een"),
    ),
    compound_joiner=None,
    word_frequencies={"de": 10, "het": 8, "van": 7, "een": 6, "en": 6, "in": 5},
    multi_word_stops=frozenset(["van de", "van het", "in de", "op de"]),
    signature=re.compile(r"\bij\b|ij[a-z]", re.IGNORECASE),
)

_POLISH = LanguageRules(
    code="pl",
    name="Polish",
    stop_words=_words("""
        a aby ah ale bardzo bez bo być ci cię ciebie co czy daleko dla do dobrze
        dokąd dość dużo dwa dwaj dwie dwoje dziś dzisiaj gdyby gdzie go godz
        ich ile im inna inne inny innych i ja ją jak jakby jaki je jeden jedna
        jedno jego jej jemu jest jestem jeśli jeżeli już każdy kiedy kilka
        kimś kto ktoś która które którego której który których którym
        którzy lat lecz lub ma mają mało mam mi mimo między mnie mogą moi
        może można mój mu musi my na nad nam nami nas nasi nasz nasza nasze
        naszego naszych natychmiast nawet nic nich nie niego niej niemu nigdy nim
        nimi niż no o obok od około on ona one oni ono oraz po pod podczas pomimo
        ponad ponieważ powinien powinna powinni powinno poza prawie przecież
        przed przede przedtem przez przy roku również sam są się skąd sobie
        sobą sposób swoje ta tak taki tam te tego tej temu ten teraz też to
        tobą tobie toteż totobą trzeba tu tutaj twoi twoja twoje twój twym ty
        tych tylko tym u w wam wami was wasi wasz wasza wasze we według wiele
        wielu więc więcej wszyscy wszystkich wszystkie wszystkim wszystko
        właśnie wte wy z za zapewne zawsze ze zeznowu znowu znów został żaden
        żadna żadne żadnych że żeby
    """),
    # Polish has no articles.
    articles=_anchored(),
    valid_single_letters=frozenset("aiwoz"),
    common_phrase_endings=_anchored("jest", "są", "był", "była", "było", "byli", "być"),
    invalid_starters=_anchored("a", "i", "ale", "bo", "czy", "że", "lub", "oraz", "do", "z", "w"),
    contractions=(),
    compound_joiner=None,
    word_frequencies={"w": 10, "i": 8, "na": 7, "z": 6, "do": 5, "się": 5},
    multi_word_stops=frozenset(["w tym", "na to", "z tego"]),
    signature=re.compile(r"[ąćęłńóśźż]", re.IGNORECASE),
)

_FRENCH = LanguageRules(
    code="fr",
    name="French",
    stop_words=_words("""
        le la les un une des du de à au aux et ou mais donc car ce cet cette ces
        mon ton son ma ta sa mes tes ses notre votre leur nos vos leurs je tu il
        elle nous vous ils elles en y qui que quoi dont où quand comment pourquoi
        quel quelle quels quelles avec sans par pour dans sur sous entre derrière
        devant être avoir faire dire aller voir venir devoir vouloir pouvoir
        falloir
    """),
    articles=_anchored("le", "la", "les", "un", "une", "des"),
    valid_single_letters=frozenset("ay"),
    common_phrase_endings=_anchored("est", "sont", "était", "étaient", "être"),
    invalid_starters=_anchored("et", "ou", "mais", "donc", "car", "que", "si", "non", "à", "de"),
    contractions=(
        ("l'", "le "),
        ("d'", "de "),
        ("j'", "je "),
        ("m'", "me "),
        ("t'", "te "),
        ("s'", "se "),
        ("n'", "ne "),
        ("c'", "ce "),
        ("qu'", "que "),
    ),
    compound_joiner=None,
    word_frequencies={"de": 10, "la": 8, "le": 7, "et": 6, "un": 5},
    multi_word_stops=frozenset(["de la", "le le", "et le"]),
    signature=re.compile(r"[éèêëàâçîïôûùüÿœæ]", re.IGNORECASE),
)

_GERMAN = LanguageRules(
    code="de",
    name="German",
    stop_words=_words("""
        der die das den dem des ein eine einer eines einem einen und oder aber wenn
        weil dass daß ob seit von aus nach bei zum zur ich du er sie es
        wir ihr mein dein sein unser euer nicht nur noch schon auch bis
        gegen durch um am im in auf zu für mit vor während über
    """),
    articles=_anchored(
        "der", "die", "das", "den", "dem", "des", "ein", "eine", "einer", "eines", "einem", "einen"
    ),
    valid_single_letters=frozenset("a"),
    common_phrase_endings=_anchored("ist", "sind", "war", "waren", "sein"),
    invalid_starters=_anchored("und", "oder", "aber", "wenn", "weil", "dass", "ob", "von", "zu"),
    contractions=(
        ("'s", " ist"),
        ("'m", " bin"),
        ("'re", " sind"),
        ("'t", " nicht"),
        ("'ll", " werden"),
        ("'d", " würde"),
    ),
    compound_joiner=re.compile(r"-"),
    word_frequencies={"der": 10, "die": 8, "und": 7, "ein": 6, "von": 5},
    multi_word_stops=frozenset(["der die", "und der", "ein von"]),
    signature=re.compile(r"[äöüß]", re.IGNORECASE),
)

_ENGLISH = LanguageRules(
    code="en",
    name="English",
    stop_words=_words("""
        a an and are as at be by for from has he in is it its of on that the to was
        were will with this but they have had what when where who which why how
        all any both each few more most other some such no nor not only own same so
        than too very can cannot could would should may might must need shall want
        every if then else thus into about against between through during before
        after above below up down out off over under again further once here
        there click link page site website online email contact information info
        details privacy policy terms conditions menu navigation search button
        submit form content
    """),
    articles=_anchored("a", "an", "the"),
    valid_single_letters=frozenset("ai"),
    common_phrase_endings=_anchored("is", "are", "was", "were", "be", "been", "being"),
    invalid_starters=_anchored("and", "or", "but", "because", "that", "if", "no", "to", "of"),
    contractions=(
        ("'s", " is"),
        ("'d", " would"),
        ("'ll", " will"),
        ("'m", " am"),
        ("'ve", " have"),
        ("'re", " are"),
        ("n't", " not"),
        ("'t", " not"),
    ),
    compound_joiner=None,
    word_frequencies={
        "the": 10, "and": 8, "to": 7, "of": 6, "a": 6, "in": 5, "that": 5,
        "is": 5, "for": 4, "it": 4, "with": 4, "as": 4, "was": 4, "on": 3,
        "this": 3, "have": 3, "by": 3, "at": 3, "be": 3, "they": 2,
    },
    multi_word_stops=frozenset([
        "in the", "of the", "to the", "on the", "for the", "at the",
        "in a", "to be", "as well as", "due to",
    ]),
    signature=re.compile(
        r"['’]s\b|n['’]t\b|['’]ve\b|['’]re\b|['’]ll\b|['’]d\b|ing\b|ed\b",
        re.IGNORECASE,
    ),
    signature_weight=1.5,
)

# Iteration order is the detector's tie-break order.
LANGUAGE_RULES: Dict[str, LanguageRules] = {
    rules.code: rules
    for rules in (_SPANISH, _ITALIAN, _PORTUGUESE, _DUTCH, _POLISH, _FRENCH, _GERMAN, _ENGLISH)
}

DEFAULT_LANGUAGE = "en"


def get_rules(code: Optional[str]) -> LanguageRules:
    """Return the rule bundle for a language code, falling back to English."""
    return LANGUAGE_RULES.get((code or "").lower(), LANGUAGE_RULES[DEFAULT_LANGUAGE])


def supported_languages() -> Dict[str, str]:
    return {code: rules.name for code, rules in LANGUAGE_RULES.items()}
