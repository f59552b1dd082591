"""Frequency ratio tables.

Static tuning data shared by the scale generator and every framework analyzer.
All tables are built once at import time and are read-only afterwards:
sequences are tuples and lookups are wrapped in ``types.MappingProxyType``.

Only exact rational ratios are stored. Decimal values and cents are derived
from them (``Ratio.decimal``, ``Ratio.cents``) so every number in an analysis
can be traced back to a ratio and a formula.

Tables:
- `JUST_INTONATION`: The 8 shuddh (natural) degrees of the personal scale (5-limit)
- `JUST_INTONATION_RATIOS`: Chromatic 5-limit reference set, P1 through P8
- `PYTHAGOREAN_RATIOS`: 3-limit major scale built from stacked pure fifths
- `PYTHAGOREAN_COMMA`, `SYNTONIC_COMMA`: The two classic commas
- `EQUAL_TEMPERAMENT`: 13 steps of 12-TET, 0 through 12 semitones
- `SHRUTIS`: The 22-shruti system as 23 positions (Sa to Sa')
- `RAGA_SHRUTIS`: Shruti membership of five common ragas
- `CIRCLE_OF_FIFTHS`: Key names in fifths order starting from C
- `TUNING_COMPARISON`: Just vs Pythagorean vs equal-tempered diatonic intervals
"""

import dataclasses
import types
import typing

import vocalprism.pitch


@dataclasses.dataclass(frozen=True)
class Ratio:

	"""
	An exact frequency ratio with its decimal value and size in cents.

	Only ``numerator`` and ``denominator`` are passed in; ``decimal`` and
	``cents`` are derived so they can never disagree with the fraction.

	Example:
		```python
		fifth = Ratio(3, 2)
		fifth.decimal  # 1.5
		fifth.cents    # 701.955...
		fifth.label    # "3:2"
		```
	"""

	numerator: int
	denominator: int
	decimal: float = dataclasses.field(init=False)
	cents: float = dataclasses.field(init=False)


	def __post_init__ (self) -> None:

		if self.numerator <= 0 or self.denominator <= 0:
			raise ValueError(f"Ratio terms must be positive, got {self.numerator}:{self.denominator}")

		decimal = self.numerator / self.denominator
		object.__setattr__(self, "decimal", decimal)
		object.__setattr__(self, "cents", vocalprism.pitch.ratio_to_cents(decimal))


	@property
	def label (self) -> str:

		"""The ratio written as ``"n:d"``."""

		return f"{self.numerator}:{self.denominator}"


	def of (self, hz: float) -> float:

		"""Return the frequency this ratio above ``hz``."""

		return hz * self.decimal


# ---------------------------------------------------------------------------
# Just intonation (5-limit, Ptolemaic)
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class JustDegree:

	"""One degree of the 8-note just-intonation scale."""

	degree: int
	svara: str
	solfege: str
	interval_name: str
	ratio: Ratio


JUST_INTONATION: typing.Tuple[JustDegree, ...] = (
	JustDegree(1, "Sa", "Do", "Unison", Ratio(1, 1)),
	JustDegree(2, "Re", "Re", "Major Second", Ratio(9, 8)),
	JustDegree(3, "Ga", "Mi", "Major Third", Ratio(5, 4)),
	JustDegree(4, "Ma", "Fa", "Perfect Fourth", Ratio(4, 3)),
	JustDegree(5, "Pa", "So", "Perfect Fifth", Ratio(3, 2)),
	JustDegree(6, "Dha", "La", "Major Sixth", Ratio(5, 3)),
	JustDegree(7, "Ni", "Ti", "Major Seventh", Ratio(15, 8)),
	JustDegree(8, "Sa'", "Do'", "Octave", Ratio(2, 1)),
)


@dataclasses.dataclass(frozen=True)
class ChromaticInterval:

	"""A named 5-limit interval with its Indian and solfège names."""

	code: str
	name: str
	svara: str
	solfege: str
	ratio: Ratio


JUST_INTONATION_RATIOS: typing.Mapping[str, ChromaticInterval] = types.MappingProxyType({
	interval.code: interval for interval in (
		ChromaticInterval("P1", "Unison", "Sa", "Do", Ratio(1, 1)),
		ChromaticInterval("m2", "Minor 2nd", "Komal Re", "Ra", Ratio(16, 15)),
		ChromaticInterval("M2", "Major 2nd", "Re", "Re", Ratio(9, 8)),
		ChromaticInterval("m3", "Minor 3rd", "Komal Ga", "Me", Ratio(6, 5)),
		ChromaticInterval("M3", "Major 3rd", "Ga", "Mi", Ratio(5, 4)),
		ChromaticInterval("P4", "Perfect 4th", "Ma", "Fa", Ratio(4, 3)),
		ChromaticInterval("A4", "Augmented 4th", "Tivra Ma", "Fi", Ratio(45, 32)),
		ChromaticInterval("d5", "Diminished 5th", "Komal Pa", "Se", Ratio(64, 45)),
		ChromaticInterval("P5", "Perfect 5th", "Pa", "So", Ratio(3, 2)),
		ChromaticInterval("m6", "Minor 6th", "Komal Dha", "Le", Ratio(8, 5)),
		ChromaticInterval("M6", "Major 6th", "Dha", "La", Ratio(5, 3)),
		ChromaticInterval("m7", "Minor 7th", "Komal Ni", "Te", Ratio(9, 5)),
		ChromaticInterval("M7", "Major 7th", "Ni", "Ti", Ratio(15, 8)),
		ChromaticInterval("P8", "Octave", "Sa'", "Do'", Ratio(2, 1)),
	)
})

# Interval codes of the shuddh (natural) major scale used for the personal scale.
SHUDDH_SCALE: typing.Tuple[str, ...] = ("P1", "M2", "M3", "P4", "P5", "M6", "M7", "P8")


# ---------------------------------------------------------------------------
# Pythagorean (3-limit)
# ---------------------------------------------------------------------------

PYTHAGOREAN_RATIOS: typing.Mapping[str, ChromaticInterval] = types.MappingProxyType({
	interval.code: interval for interval in (
		ChromaticInterval("P1", "Unison", "Sa", "Do", Ratio(1, 1)),
		ChromaticInterval("M2", "Major 2nd", "Re", "Re", Ratio(9, 8)),
		ChromaticInterval("M3", "Ditone (Pythagorean 3rd)", "Ga", "Mi", Ratio(81, 64)),
		ChromaticInterval("P4", "Perfect 4th", "Ma", "Fa", Ratio(4, 3)),
		ChromaticInterval("P5", "Perfect 5th", "Pa", "So", Ratio(3, 2)),
		ChromaticInterval("M6", "Pythagorean 6th", "Dha", "La", Ratio(27, 16)),
		ChromaticInterval("M7", "Pythagorean 7th", "Ni", "Ti", Ratio(243, 128)),
		ChromaticInterval("P8", "Octave", "Sa'", "Do'", Ratio(2, 1)),
	)
})


@dataclasses.dataclass(frozen=True)
class Comma:

	"""A small interval left over when two tuning paths should meet but don't."""

	name: str
	ratio: Ratio
	description: str


# (3/2)^12 / 2^7: twelve pure fifths overshoot seven octaves.
PYTHAGOREAN_COMMA = Comma(
	name="Pythagorean comma",
	ratio=Ratio(3 ** 12, 2 ** 19),
	description="The gap when 12 perfect fifths don't equal 7 octaves",
)

# (81/64) / (5/4): the Pythagorean ditone against the just major third.
SYNTONIC_COMMA = Comma(
	name="Syntonic comma",
	ratio=Ratio(81, 80),
	description="The gap between a Pythagorean (81:64) and a just (5:4) major third",
)


# ---------------------------------------------------------------------------
# Equal temperament (12-TET)
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class EqualTemperedStep:

	"""One step of 12-tone equal temperament."""

	semitones: int
	name: str
	ratio: float
	cents: float


ET_INTERVAL_NAMES: typing.Tuple[str, ...] = (
	"Unison",
	"Minor 2nd",
	"Major 2nd",
	"Minor 3rd",
	"Major 3rd",
	"Perfect 4th",
	"Tritone",
	"Perfect 5th",
	"Minor 6th",
	"Major 6th",
	"Minor 7th",
	"Major 7th",
	"Octave",
)

EQUAL_TEMPERAMENT: typing.Tuple[EqualTemperedStep, ...] = tuple(
	EqualTemperedStep(semitones=n, name=ET_INTERVAL_NAMES[n], ratio=2 ** (n / 12), cents=100.0 * n)
	for n in range(13)
)


# ---------------------------------------------------------------------------
# 22 shruti system
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class Shruti:

	"""
	One of the 23 shruti positions from Sa (1:1) to Sa' (2:1).

	Attributes:
		number: Position 1-23.
		region: The svara region the shruti belongs to (Sa, Re, Ga, Ma, Pa, Dha, Ni, Sa').
		svara: Variant name within the region (e.g. ``"Komal Re 1"``).
		name: Traditional Sanskrit name (e.g. ``"Ekashruti Rishabha"``).
		ratio: Exact ratio above Sa.
	"""

	number: int
	region: str
	svara: str
	name: str
	ratio: Ratio


SHRUTIS: typing.Tuple[Shruti, ...] = (
	Shruti(1, "Sa", "Sa", "Shadja", Ratio(1, 1)),

	Shruti(2, "Re", "Komal Re 1", "Ekashruti Rishabha", Ratio(256, 243)),
	Shruti(3, "Re", "Komal Re 2", "Dvishruti Rishabha", Ratio(16, 15)),
	Shruti(4, "Re", "Shuddha Re", "Trishruti Rishabha", Ratio(10, 9)),
	Shruti(5, "Re", "Re", "Chatushruti Rishabha", Ratio(9, 8)),

	Shruti(6, "Ga", "Komal Ga 1", "Ekashruti Gandhara", Ratio(32, 27)),
	Shruti(7, "Ga", "Komal Ga 2", "Dvishruti Gandhara", Ratio(6, 5)),
	Shruti(8, "Ga", "Shuddha Ga", "Trishruti Gandhara", Ratio(5, 4)),
	Shruti(9, "Ga", "Ga", "Chatushruti Gandhara", Ratio(81, 64)),

	Shruti(10, "Ma", "Shuddha Ma", "Dvishruti Madhyama", Ratio(4, 3)),
	Shruti(11, "Ma", "Ma", "Trishruti Madhyama", Ratio(27, 20)),
	Shruti(12, "Ma", "Tivra Ma 1", "Chatushruti Madhyama", Ratio(45, 32)),
	Shruti(13, "Ma", "Tivra Ma 2", "Panchashruti Madhyama", Ratio(729, 512)),

	# Pa is never altered.
	Shruti(14, "Pa", "Pa", "Panchama", Ratio(3, 2)),

	Shruti(15, "Dha", "Komal Dha 1", "Ekashruti Dhaivata", Ratio(128, 81)),
	Shruti(16, "Dha", "Komal Dha 2", "Dvishruti Dhaivata", Ratio(8, 5)),
	Shruti(17, "Dha", "Shuddha Dha", "Trishruti Dhaivata", Ratio(5, 3)),
	Shruti(18, "Dha", "Dha", "Chatushruti Dhaivata", Ratio(27, 16)),

	Shruti(19, "Ni", "Komal Ni 1", "Ekashruti Nishada", Ratio(16, 9)),
	Shruti(20, "Ni", "Komal Ni 2", "Dvishruti Nishada", Ratio(9, 5)),
	Shruti(21, "Ni", "Shuddha Ni", "Trishruti Nishada", Ratio(15, 8)),
	Shruti(22, "Ni", "Ni", "Chatushruti Nishada", Ratio(243, 128)),

	Shruti(23, "Sa'", "Sa'", "Octave", Ratio(2, 1)),
)

SVARA_REGIONS: typing.Tuple[str, ...] = ("Sa", "Re", "Ga", "Ma", "Pa", "Dha", "Ni")


def shrutis_in_region (region: str) -> typing.Tuple[Shruti, ...]:

	"""Return the shruti positions belonging to one svara region, in order."""

	if region not in SVARA_REGIONS and region != "Sa'":
		raise ValueError(f"Unknown svara region: {region!r}. Available: {list(SVARA_REGIONS)}")

	return tuple(s for s in SHRUTIS if s.region == region)


@dataclasses.dataclass(frozen=True)
class Raga:

	"""A raga expressed as a subset of shruti positions (1-based numbers)."""

	key: str
	name: str
	shrutis: typing.Tuple[int, ...]
	description: str


RAGA_SHRUTIS: typing.Tuple[Raga, ...] = (
	Raga("bilawal", "Bilawal", (1, 5, 8, 10, 14, 17, 21, 23), "Major scale equivalent"),
	Raga("kafi", "Kafi", (1, 5, 7, 10, 14, 17, 20, 23), "Dorian-like scale"),
	Raga("bhairav", "Bhairav", (1, 3, 8, 10, 14, 16, 21, 23), "Morning raga with flat 2nd and 6th"),
	Raga("yaman", "Yaman", (1, 5, 8, 12, 14, 17, 21, 23), "Evening raga with sharp 4th"),
	Raga("todi", "Todi", (1, 3, 7, 12, 14, 16, 21, 23), "Complex raga with multiple komal notes"),
)


def get_raga (key: str) -> Raga:

	"""Look up a raga by its key (e.g. ``"yaman"``)."""

	for raga in RAGA_SHRUTIS:
		if raga.key == key:
			return raga

	raise ValueError(f"Unknown raga: {key!r}. Available: {[r.key for r in RAGA_SHRUTIS]}")


# ---------------------------------------------------------------------------
# Circle of fifths
# ---------------------------------------------------------------------------

# Fifths order from C; position of pitch class pc is (7 * pc) % 12.
CIRCLE_OF_FIFTHS: typing.Tuple[str, ...] = (
	"C", "G", "D", "A", "E", "B", "F#", "Db", "Ab", "Eb", "Bb", "F"
)


def circle_of_fifths_position (pc: int) -> int:

	"""Position (0-11) of a pitch class on the circle of fifths, clockwise from C."""

	return (7 * pc) % 12


# ---------------------------------------------------------------------------
# Tuning comparison: just vs Pythagorean vs equal temperament
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class TuningComparisonRow:

	"""One diatonic interval measured in three tuning systems."""

	name: str
	just: Ratio
	pythagorean: Ratio
	et_semitones: int


	@property
	def et_ratio (self) -> float:

		return 2 ** (self.et_semitones / 12)


	@property
	def et_cents (self) -> float:

		return 100.0 * self.et_semitones


def _build_tuning_comparison () -> typing.Tuple[TuningComparisonRow, ...]:

	rows = []
	et_steps = (0, 2, 4, 5, 7, 9, 11, 12)

	for code, semitones in zip(SHUDDH_SCALE, et_steps):
		just = JUST_INTONATION_RATIOS[code]
		rows.append(TuningComparisonRow(
			name=EQUAL_TEMPERAMENT[semitones].name,
			just=just.ratio,
			pythagorean=PYTHAGOREAN_RATIOS[code].ratio,
			et_semitones=semitones,
		))

	return tuple(rows)


TUNING_COMPARISON: typing.Tuple[TuningComparisonRow, ...] = _build_tuning_comparison()
