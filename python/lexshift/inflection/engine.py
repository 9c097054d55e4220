"""
Inflection engine: pluralization and identifier case transforms.

Every transform reads the engine's current InflectionTables snapshot once
and works on that snapshot only. Registering new rules through configure()
builds a new snapshot and swaps it in with a single assignment, so a
transform running on another thread sees either the old tables or the new
ones, never a half-applied update.
"""

import logging
import re
import threading
import unicodedata
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from ..errors import InflectionError
from .constants import (
    ID_SUFFIX,
    NAMESPACE_SEPARATOR,
    PATH_SEPARATOR,
    TRANSLITERATION_REPLACEMENT,
    TRANSLITERATIONS,
)
from .tables import InflectionTables, Inflections, default_tables, english_inflections

logger = logging.getLogger(__name__)

_TRANSLITERATION_TABLE = str.maketrans(TRANSLITERATIONS)

_LEADING_WORD = re.compile(r"^[a-z\d]*")
_SEGMENT = re.compile(r"(?:_|(/))([a-z\d]*)", re.IGNORECASE)
_ACRONYM_RUN = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_CAMEL_HUMP = re.compile(r"([a-z\d])([A-Z])")
_LEADING_UNDERSCORES = re.compile(r"\A_+")
_ID_SUFFIX = re.compile(re.escape(ID_SUFFIX) + r"\Z")
_HUMAN_WORD = re.compile(r"[a-z\d]+", re.IGNORECASE)
_FIRST_WORD_CHAR = re.compile(r"\A\w")
_TITLE_LETTER = re.compile(r"\b(?<!['’`])[a-z]")
_SCHEMA_PREFIX = re.compile(r".*\.")
_PARAMETER_JUNK = re.compile(r"[^a-z0-9\-_]+", re.IGNORECASE)


def _wants_upper(first_letter: Union[bool, str]) -> bool:
    if isinstance(first_letter, bool):
        return first_letter
    if first_letter in ("upper", "lower"):
        return first_letter == "upper"
    raise ValueError(f"first_letter must be 'upper', 'lower' or a bool, got {first_letter!r}")


def _last_separator(path: str) -> Optional[tuple[int, int]]:
    colon = path.rfind(NAMESPACE_SEPARATOR)
    slash = path.rfind(PATH_SEPARATOR)
    if colon == -1 and slash == -1:
        return None
    if colon > slash:
        return colon, colon + len(NAMESPACE_SEPARATOR)
    return slash, slash + len(PATH_SEPARATOR)


def upcase_first(string: str) -> str:
    """Uppercase the first character if it is a word character."""
    return _FIRST_WORD_CHAR.sub(lambda m: m.group(0).upper(), string, count=1)


def transliterate(string: str, replacement: str = TRANSLITERATION_REPLACEMENT) -> str:
    """
    Replace non-ASCII characters with an ASCII approximation.

    Accented letters lose their accents, a few Latin letters with no
    decomposition are spelled out, and anything else becomes replacement.

    Examples:
        >>> transliterate("Ærøskøbing")
        'AEroskobing'
        >>> transliterate("jürgen")
        'jurgen'
        >>> transliterate("日本")
        '??'
    """
    decomposed = unicodedata.normalize("NFKD", string.translate(_TRANSLITERATION_TABLE))
    chars = []
    for char in decomposed:
        if char.isascii():
            chars.append(char)
        elif not unicodedata.combining(char):
            chars.append(replacement)
    return "".join(chars)


def ordinal(number: int) -> str:
    """
    Return the suffix for an ordinal number.

    Examples:
        >>> ordinal(1)
        'st'
        >>> ordinal(12)
        'th'
        >>> ordinal(-1023)
        'rd'
    """
    number = abs(int(number))
    if number % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def ordinalize(number: int) -> str:
    """Turn a number into an ordinal string: 1st, 2nd, 3rd, 4th."""
    return f"{number}{ordinal(number)}"


class InflectionEngine:
    """
    Applies inflection tables to words and identifiers.

    Args:
        tables: Initial snapshot (default: the English tables)

    Examples:
        >>> engine = InflectionEngine()
        >>> engine.pluralize("person")
        'people'
        >>> engine.camelize("html_tidy")
        'HTMLTidy'
        >>> with engine.configure() as inflect:
        ...     inflect.irregular("octopus", "octopodes")
        >>> engine.pluralize("octopus")
        'octopodes'
    """

    def __init__(self, tables: Optional[InflectionTables] = None):
        self._tables = tables if tables is not None else default_tables()
        self._write_lock = threading.Lock()
        self._writer: Optional[int] = None

    @property
    def tables(self) -> InflectionTables:
        """The current read-only snapshot."""
        return self._tables

    @contextmanager
    def _writing(self, action: str) -> Iterator[None]:
        # The lock is held across configure()'s yield and is not reentrant
        if self._writer == threading.get_ident():
            raise InflectionError(f"Cannot {action} while configure() is active on this engine in the same thread")
        with self._write_lock:
            self._writer = threading.get_ident()
            try:
                yield
            finally:
                self._writer = None

    @contextmanager
    def configure(self) -> Iterator[Inflections]:
        """
        Register new rules, acronyms or exceptions.

        Yields a builder seeded with the current tables. When the block exits
        normally the builder is frozen and swapped in. If the block raises,
        the current tables stay untouched. Writers are serialized; readers
        are never blocked.

        Raises:
            InflectionError: If called again, or reset() is called, from
                inside a configure() block of the same engine
        """
        with self._writing("configure"):
            inflect = Inflections.from_tables(self._tables)
            yield inflect
            self._tables = inflect.freeze()
            logger.debug(
                f"Inflection tables updated: {len(inflect.plurals)} plural, "
                f"{len(inflect.singulars)} singular, {len(inflect.irregulars)} irregular, "
                f"{len(inflect.uncountables)} uncountable, {len(inflect.acronyms)} acronyms"
            )

    def reset(self) -> None:
        """Restore the default English tables."""
        tables = english_inflections().freeze()
        with self._writing("reset"):
            self._tables = tables
        logger.debug("Inflection tables reset to defaults")

    # ------------------------------------------------------------------
    # Pluralization
    # ------------------------------------------------------------------

    def pluralize(self, word: str, count: Optional[int] = None) -> str:
        """
        Return the plural form of a word.

        Args:
            word: Word to pluralize (compound words inflect their last part)
            count: If exactly 1, the word is returned unchanged

        Examples:
            >>> engine.pluralize("post")
            'posts'
            >>> engine.pluralize("sheep")
            'sheep'
            >>> engine.pluralize("CamelOctopus")
            'CamelOctopi'
            >>> engine.pluralize("blargle", 1)
            'blargle'
        """
        return self._tables.rules.pluralize(word, count)

    def singularize(self, word: str) -> str:
        """
        Return the singular form of a word.

        Examples:
            >>> engine.singularize("posts")
            'post'
            >>> engine.singularize("people")
            'person'
            >>> engine.singularize("word")
            'word'
        """
        return self._tables.rules.singularize(word)

    # ------------------------------------------------------------------
    # Case transforms
    # ------------------------------------------------------------------

    def camelize(self, term: str, uppercase_first_letter: Union[bool, str] = True) -> str:
        """
        Convert an underscored path to CamelCase.

        "/" becomes "::", so paths turn into namespaces.

        Args:
            term: Underscored word or path
            uppercase_first_letter: True/"upper" for UpperCamelCase,
                False/"lower" for lowerCamelCase

        Examples:
            >>> engine.camelize("active_model/errors")
            'ActiveModel::Errors'
            >>> engine.camelize("active_model", "lower")
            'activeModel'
            >>> engine.camelize("html_tidy")
            'HTMLTidy'
        """
        acronyms = self._tables.acronyms

        if _wants_upper(uppercase_first_letter):
            string = _LEADING_WORD.sub(
                lambda m: acronyms.lookup(m.group(0)) or m.group(0).capitalize(), term, count=1
            )
        else:
            string = acronyms.lower_first_re.sub(lambda m: m.group(0).lower(), term, count=1)

        def hump(match: re.Match) -> str:
            slash, segment = match.groups()
            return (slash or "") + (acronyms.lookup(segment) or segment.capitalize())

        string = _SEGMENT.sub(hump, string)
        return string.replace(PATH_SEPARATOR, NAMESPACE_SEPARATOR)

    def underscore(self, camel_cased_word: str) -> str:
        """
        Convert CamelCase to an underscored, lowercase form.

        "::" becomes "/" and dashes become underscores.

        Examples:
            >>> engine.underscore("ActiveModel::Errors")
            'active_model/errors'
            >>> engine.underscore("HTMLTidyGenerator")
            'html_tidy_generator'
        """
        acronyms = self._tables.acronyms

        word = camel_cased_word.replace(NAMESPACE_SEPARATOR, PATH_SEPARATOR)
        word = acronyms.underscore_re.sub(
            lambda m: ("_" if m.group(1) else "") + m.group(2).lower(), word
        )
        word = _ACRONYM_RUN.sub(r"\1_\2", word)
        word = _CAMEL_HUMP.sub(r"\1_\2", word)
        word = word.replace("-", "_")
        return word.lower()

    def dasherize(self, underscored_word: str) -> str:
        """Replace underscores with dashes: "puni_puni" -> "puni-puni"."""
        return underscored_word.replace("_", "-")

    def humanize(self, lower_case_and_underscored_word: str, capitalize: bool = True) -> str:
        """
        Turn an attribute name into something readable.

        Applies human rules, drops leading underscores and a trailing "_id",
        turns underscores into spaces and restores acronyms. Only the first
        character is capitalized.

        Examples:
            >>> engine.humanize("employee_salary")
            'Employee salary'
            >>> engine.humanize("author_id")
            'Author'
            >>> engine.humanize("author_id", capitalize=False)
            'author'
            >>> engine.humanize("html_page")
            'HTML page'
        """
        tables = self._tables
        acronyms = tables.acronyms

        result = tables.rules.humanize_rules(lower_case_and_underscored_word)
        result = _LEADING_UNDERSCORES.sub("", result, count=1)
        result = _ID_SUFFIX.sub("", result, count=1)
        result = result.replace("_", " ")
        result = _HUMAN_WORD.sub(
            lambda m: acronyms.lookup_word(m.group(0)) or m.group(0).lower(), result
        )
        if capitalize:
            result = upcase_first(result)
        return result

    def titleize(self, word: str) -> str:
        """
        Capitalize every word, for titles.

        Examples:
            >>> engine.titleize("man from the boondocks")
            'Man From The Boondocks'
            >>> engine.titleize("x-men: the last stand")
            'X Men: The Last Stand'
            >>> engine.titleize("raiders_of_the_lost_ark")
            'Raiders Of The Lost Ark'
        """
        humanized = self.humanize(self.underscore(word))
        return _TITLE_LETTER.sub(lambda m: m.group(0).upper(), humanized)

    # ------------------------------------------------------------------
    # Class/table names
    # ------------------------------------------------------------------

    def tableize(self, class_name: str) -> str:
        """
        Create a table name from a class name.

        Examples:
            >>> engine.tableize("RawScaledScorer")
            'raw_scaled_scorers'
            >>> engine.tableize("fancyCategory")
            'fancy_categories'
        """
        return self.pluralize(self.underscore(class_name))

    def classify(self, table_name: str) -> str:
        """
        Create a class name from a table name.

        A schema qualifier ("schema.table") is dropped.

        Examples:
            >>> engine.classify("egg_and_hams")
            'EggAndHam'
            >>> engine.classify("schema.posts")
            'Post'
        """
        return self.camelize(self.singularize(_SCHEMA_PREFIX.sub("", table_name, count=1)))

    def foreign_key(self, class_name: str, separate_class_name_and_id_with_underscore: bool = True) -> str:
        """
        Create a foreign key column name from a class name.

        Examples:
            >>> engine.foreign_key("Message")
            'message_id'
            >>> engine.foreign_key("Message", False)
            'messageid'
            >>> engine.foreign_key("Admin::Post")
            'post_id'
        """
        suffix = ID_SUFFIX if separate_class_name_and_id_with_underscore else ID_SUFFIX.lstrip("_")
        return self.underscore(self.demodulize(class_name)) + suffix

    def demodulize(self, path: str) -> str:
        """
        Remove the namespace (or path) part of a name.

        Examples:
            >>> engine.demodulize("ActiveSupport::Inflector::Inflections")
            'Inflections'
            >>> engine.demodulize("active_support/inflector")
            'inflector'
            >>> engine.demodulize("Inflections")
            'Inflections'
        """
        separator = _last_separator(path)
        return path if separator is None else path[separator[1]:]

    def deconstantize(self, path: str) -> str:
        """
        Remove the rightmost segment of a namespaced name.

        Examples:
            >>> engine.deconstantize("Net::HTTP")
            'Net'
            >>> engine.deconstantize("::Net::HTTP")
            '::Net'
            >>> engine.deconstantize("String")
            ''
        """
        separator = _last_separator(path)
        return "" if separator is None else path[:separator[0]]

    def parameterize(self, string: str, separator: str = "-", preserve_case: bool = False) -> str:
        """
        Make a string usable as part of a URL.

        Args:
            string: Arbitrary text
            separator: Replaces every run of non-alphanumeric characters;
                "" removes the runs
            preserve_case: Keep the original letter case

        Examples:
            >>> engine.parameterize("Donald E. Knuth")
            'donald-e-knuth'
            >>> engine.parameterize("Donald E. Knuth", separator="_")
            'donald_e_knuth'
            >>> engine.parameterize("Donald E. Knuth", separator="")
            'donaldeknuth'
        """
        result = _PARAMETER_JUNK.sub(lambda m: separator, transliterate(string))

        if separator:
            sep = f"(?:{re.escape(separator)})"
            result = re.sub(f"{sep}{{2,}}", lambda m: separator, result)
            result = re.sub(f"^{sep}|{sep}$", "", result)

        return result if preserve_case else result.lower()
