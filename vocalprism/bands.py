"""Classification bands and pitch-class lookup tables.

Frequency-keyed classifications (vocal category, saptak, chakra, singing-bowl
size, brainwave band) are stored as :class:`BandTable` instances: sorted,
contiguous, half-open ``[lower, upper)`` intervals. A value belongs to the
first band whose interval contains it, so a frequency sitting exactly on a
shared boundary always resolves to the *upper* band (100 Hz is Baritone,
not Bass).

Pitch-class keyed classifications (Gregorian mode, Western key signature)
are plain lookups over the 12 pitch classes.

Example:
	```python
	import vocalprism.bands

	band = vocalprism.bands.VOCAL_CATEGORIES.nearest(165.0)
	band.value.category    # "Tenor / Low Alto"
	band.percent(165.0)    # 62.5

	vocalprism.bands.key_signature_for_pc(3).key   # "Eb"
	```
"""

import bisect
import dataclasses
import math
import types
import typing

import vocalprism.pitch


T = typing.TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Band (typing.Generic[T]):

	"""
	A half-open interval ``[lower, upper)`` carrying a descriptive record.

	``upper`` may be ``math.inf`` for an open-topped band.
	"""

	lower: float
	upper: float
	value: T


	def contains (self, x: float) -> bool:

		"""True when ``lower <= x < upper``."""

		return self.lower <= x < self.upper


	@property
	def bounded (self) -> bool:

		return math.isfinite(self.lower) and math.isfinite(self.upper)


	def percent (self, x: float) -> float:

		"""Position of ``x`` through the band as a percentage, clamped to 0-100.

		Open-ended bands have no meaningful width and always report 0.
		"""

		if not self.bounded:
			return 0.0

		raw = (x - self.lower) / (self.upper - self.lower) * 100

		return min(100.0, max(0.0, raw))


class BandTable (typing.Generic[T]):

	"""
	An ordered partition of a numeric range into contiguous bands.

	Construction fails if the bands are empty, out of order, overlapping or
	gapped, so any table that imports successfully is a partition of
	``[domain[0], domain[1])``.
	"""

	def __init__ (self, name: str, bands: typing.Sequence[Band[T]]) -> None:

		if not bands:
			raise ValueError(f"Band table {name!r} has no bands")

		for band in bands:
			if not band.lower < band.upper:
				raise ValueError(f"Band table {name!r}: empty band [{band.lower}, {band.upper})")

		for below, above in zip(bands, bands[1:]):
			if below.upper != above.lower:
				raise ValueError(
					f"Band table {name!r}: bands must be contiguous, "
					f"got [{below.lower}, {below.upper}) then [{above.lower}, {above.upper})"
				)

		self.name = name
		self._bands: typing.Tuple[Band[T], ...] = tuple(bands)
		self._lowers: typing.List[float] = [band.lower for band in self._bands]


	def __len__ (self) -> int:

		return len(self._bands)


	def __iter__ (self) -> typing.Iterator[Band[T]]:

		return iter(self._bands)


	def __getitem__ (self, index: int) -> Band[T]:

		return self._bands[index]


	@property
	def domain (self) -> typing.Tuple[float, float]:

		"""The ``(lower, upper)`` range covered by the table."""

		return self._bands[0].lower, self._bands[-1].upper


	def index_of (self, value: float) -> typing.Optional[int]:

		"""Index of the band containing ``value``, or ``None`` outside the domain."""

		i = bisect.bisect_right(self._lowers, value) - 1

		if i < 0 or not self._bands[i].contains(value):
			return None

		return i


	def lookup (self, value: float) -> typing.Optional[Band[T]]:

		"""Return the band containing ``value``, or ``None`` outside the domain."""

		i = self.index_of(value)

		return None if i is None else self._bands[i]


	def nearest (self, value: float) -> Band[T]:

		"""Return the band containing ``value``, clamping to the edge bands.

		Values below the domain resolve to the first band and values at or
		above it to the last band.
		"""

		band = self.lookup(value)

		if band is not None:
			return band

		if value < self._bands[0].lower:
			return self._bands[0]

		return self._bands[-1]


	def is_partition (self) -> bool:

		"""True when the bands are non-empty, ordered and gap-free."""

		return (
			all(band.lower < band.upper for band in self._bands)
			and all(below.upper == above.lower for below, above in zip(self._bands, self._bands[1:]))
		)


	def matches (self, value: float) -> int:

		"""Count the bands that contain ``value`` (exactly 1 inside the domain)."""

		return sum(1 for band in self._bands if band.contains(value))


def _table (name: str, edges: typing.Sequence[float], values: typing.Sequence[T]) -> BandTable[T]:

	"""Build a band table from ``len(values) + 1`` ascending edges."""

	if len(edges) != len(values) + 1:
		raise ValueError(f"Band table {name!r}: need {len(values) + 1} edges, got {len(edges)}")

	return BandTable(name, [
		Band(lower=lower, upper=upper, value=value)
		for lower, upper, value in zip(edges, edges[1:], values)
	])


# ---------------------------------------------------------------------------
# Vocal category (speaking-voice fundamental, not singing range)
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class VocalCategory:

	category: str
	range_note: str
	description: str


VOCAL_CATEGORIES: BandTable[VocalCategory] = _table(
	"vocal_category",
	(65.0, 100.0, 140.0, 180.0, 220.0, 280.0, 400.0),
	(
		VocalCategory("Bass", "E2-G2", "Lowest male speaking voice"),
		VocalCategory("Baritone", "G2-C#3", "Most common male speaking voice"),
		VocalCategory("Tenor / Low Alto", "C#3-F#3", "Higher male or lower female speaking voice"),
		VocalCategory("Alto / Mezzo", "F#3-A3", "Middle female speaking voice"),
		VocalCategory("Soprano", "A3-C#4", "Higher female speaking voice"),
		VocalCategory("High Soprano", "C#4-G4", "Highest female speaking voice"),
	),
)


# ---------------------------------------------------------------------------
# Saptak (octave register in Indian classical music)
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class Saptak:

	name: str
	description: str
	quality: str


SAPTAKS: BandTable[Saptak] = _table(
	"saptak",
	(65.0, 131.0, 262.0, 523.0),
	(
		Saptak("Mandra Saptak", "Lower octave", "Grounding, calming, associated with deep rest"),
		Saptak("Madhya Saptak", "Middle octave", "Balanced, conversational, natural speaking range"),
		Saptak("Taar Saptak", "Upper octave", "Energizing, expressive, associated with alertness"),
	),
)


# ---------------------------------------------------------------------------
# Chakra association (traditional mapping, not a medical claim)
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class Chakra:

	name: str
	note: str
	bija: str
	quality: str
	color: str


CHAKRAS: BandTable[Chakra] = _table(
	"chakra",
	(0.0, 130.0, 147.0, 165.0, 175.0, 196.0, 220.0, math.inf),
	(
		Chakra("Root (Muladhara)", "C", "LAM", "Grounding, stability, security", "#E53935"),
		Chakra("Sacral (Svadhisthana)", "D", "VAM", "Creativity, flow, emotion", "#FF9800"),
		Chakra("Solar Plexus (Manipura)", "E", "RAM", "Will, confidence, transformation", "#FDD835"),
		Chakra("Heart (Anahata)", "F", "YAM", "Connection, compassion, breath", "#4CAF50"),
		Chakra("Throat (Vishuddha)", "G", "HAM", "Expression, truth, communication", "#2196F3"),
		Chakra("Third Eye (Ajna)", "A", "OM", "Clarity, intuition, insight", "#673AB7"),
		Chakra("Crown (Sahasrara)", "B", "Silence", "Transcendence, unity, presence", "#9C27B0"),
	),
)


# ---------------------------------------------------------------------------
# Singing bowl size
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class BowlSize:

	size: str
	diameter: str
	weight: str
	character: str
	note: str


BOWL_SIZES: BandTable[BowlSize] = _table(
	"bowl_size",
	(0.0, 150.0, 250.0, 400.0, math.inf),
	(
		BowlSize(
			"Large", "25-35cm", "800-1500g", "Deep, grounding, long sustain",
			"These larger bowls produce fundamental frequencies in the bass range with rich, complex overtones.",
		),
		BowlSize(
			"Medium", "15-25cm", "400-800g", "Balanced, warm, versatile",
			"Medium bowls are the most common and versatile, suitable for most practices.",
		),
		BowlSize(
			"Small", "10-15cm", "200-400g", "Bright, clear, penetrating",
			"Smaller bowls have higher fundamentals with crisp, cutting overtones.",
		),
		BowlSize(
			"Very Small", "<10cm", "<200g", "High, ethereal, delicate",
			"The smallest bowls produce bell-like tones in the upper registers.",
		),
	),
)


# ---------------------------------------------------------------------------
# EEG brainwave bands (keyed by beat frequency, not by pitch)
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class BrainwaveState:

	key: str
	state: str
	description: str
	color: str


BRAINWAVE_BANDS: BandTable[BrainwaveState] = _table(
	"brainwave",
	(0.5, 4.0, 8.0, 12.0, 30.0, math.inf),
	(
		BrainwaveState("delta", "Delta (δ)", "Deep rest, restoration, unconscious processing", "#2D3A4A"),
		BrainwaveState("theta", "Theta (θ)", "Deep relaxation, creativity, intuition, light dreams", "#5B4B8A"),
		BrainwaveState("alpha", "Alpha (α)", "Calm wakefulness, meditation, visualization", "#4A7B5B"),
		BrainwaveState("beta", "Beta (β)", "Alert focus, active thinking, concentration", "#B8863B"),
		BrainwaveState("gamma", "Gamma (γ)", "Peak performance, insight, heightened perception", "#A84A4A"),
	),
)

# Beats slower than the delta band are heard as a single steady tone.
UNISON_STATE = BrainwaveState("unison", "Unison", "Perfect stillness, no beating", "#666666")


# ---------------------------------------------------------------------------
# Gregorian modes, keyed by the natural letter of the nearest pitch class
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class Mode:

	final: str
	mode: str
	character: str
	affect: str
	use: str
	example: str


MODES: typing.Mapping[str, Mode] = types.MappingProxyType({
	mode.final: mode for mode in (
		Mode(
			"C", "Ionian (Major)", "Simple, direct", "Clarity, innocence", "Straightforward texts",
			"Ionian (Major) is the 'default' mode we're most familiar with: bright, resolved, complete.",
		),
		Mode(
			"D", "Dorian", "Serious, balanced", "Can express any emotion", "Versatile, commonly used",
			"Dorian has a minor third but major sixth: it's serious but not sad, often described as 'balanced.'",
		),
		Mode(
			"E", "Phrygian", "Mystic, introspective", "Incites to tears, penitential", "Lenten, penitential chants",
			"Phrygian starts with a half step, which gives it an exotic, Spanish, or Middle Eastern quality.",
		),
		Mode(
			"F", "Lydian", "Bright, joyful", "Happiness, modesty", "Celebratory, gentle",
			"Lydian has a raised fourth: it sounds 'floating' or 'dreamy,' often used in film scores.",
		),
		Mode(
			"G", "Mixolydian", "Uniting, moderate", "Brings extremes together", "Balanced expression",
			"Mixolydian is major with a flat seventh, the sound of rock, blues, and folk music.",
		),
		Mode(
			"A", "Aeolian (Natural Minor)", "Melancholic, serious", "Sadness, contemplation", "Somber texts",
			"Aeolian (Natural Minor) is the 'sad' mode, used for melancholic or contemplative expression.",
		),
		Mode(
			"B", "Locrian (Theoretical)", "Unstable, tense", "Rarely used due to diminished fifth", "Theoretical only",
			"Locrian is theoretical: its diminished fifth makes it unstable and rarely used.",
		),
	)
})


def mode_for_pc (pc: int) -> Mode:

	"""Return the Gregorian mode whose final is the natural letter of ``pc``.

	Sharpened pitch classes fall back to their natural letter (C# -> C).
	"""

	letter = vocalprism.pitch.NOTE_NAMES[pc % 12][0]

	return MODES[letter]


# ---------------------------------------------------------------------------
# Western major key signatures
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class KeySignature:

	key: str
	sharps: int
	flats: int
	signature: str
	character: str


KEY_SIGNATURES: typing.Mapping[str, KeySignature] = types.MappingProxyType({
	signature.key: signature for signature in (
		KeySignature("C", 0, 0, "No sharps or flats", "Pure, innocent, simple"),
		KeySignature("G", 1, 0, "1 sharp (F#)", "Bright, rustic, pastoral"),
		KeySignature("D", 2, 0, "2 sharps (F#, C#)", "Triumphant, joyful"),
		KeySignature("A", 3, 0, "3 sharps (F#, C#, G#)", "Warm, clear, hopeful"),
		KeySignature("E", 4, 0, "4 sharps (F#, C#, G#, D#)", "Bright, joyful, heavenly"),
		KeySignature("B", 5, 0, "5 sharps", "Wild, passionate"),
		KeySignature("F#", 6, 0, "6 sharps", "Brilliant, hard"),
		KeySignature("C#", 7, 0, "7 sharps", "Intense, complex"),
		KeySignature("F", 0, 1, "1 flat (Bb)", "Pastoral, calm"),
		KeySignature("Bb", 0, 2, "2 flats (Bb, Eb)", "Cheerful, joyous"),
		KeySignature("Eb", 0, 3, "3 flats", "Heroic, bold"),
		KeySignature("Ab", 0, 4, "4 flats", "Soft, gentle"),
		KeySignature("Db", 0, 5, "5 flats", "Warm, rich"),
		KeySignature("Gb", 0, 6, "6 flats", "Mellow, mysterious"),
	)
})

# Conventional major-key spelling per pitch class (fewest accidentals; F# over Gb).
MAJOR_KEY_SPELLING: typing.Tuple[str, ...] = (
	"C", "Db", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B"
)


def key_signature_for_pc (pc: int) -> KeySignature:

	"""Return the major key signature for a pitch class (0 = C ... 11 = B)."""

	return KEY_SIGNATURES[MAJOR_KEY_SPELLING[pc % 12]]
