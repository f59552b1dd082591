"""Western classical framework - 1600s to present, the common practice tradition.

Key signature of f0's nearest pitch class, its speaking-voice category, and
the I-IV-V triad roots built on pure ratios.
"""

import dataclasses

import vocalprism.bands
import vocalprism.frameworks
import vocalprism.pitch


EQUAL_TEMPERAMENT_NOTE = (
	"Equal temperament makes every key equally usable but equally imperfect. Fifths are "
	"2 cents flat of pure; major thirds are 14 cents sharp."
)

A440_NOTE = (
	"In 1939, an international conference standardized A4 = 440 Hz for orchestral tuning. "
	"There is nothing acoustically special about 440 Hz."
)


@dataclasses.dataclass(frozen=True)
class KeyReading:

	key: str
	sharps: int
	flats: int
	signature: str
	character: str


@dataclasses.dataclass(frozen=True)
class VocalCategoryReading:

	"""
	Speaking-voice category of f0.

	Attributes:
		position_in_range: ``(f0 - lower) / (upper - lower) * 100``, clamped to 0-100.
		in_range: False when f0 lies outside 65-400 Hz and the nearest edge
			category was used.
	"""

	category: str
	range_note: str
	description: str
	lower_hz: float
	upper_hz: float
	position_in_range: float
	in_range: bool


@dataclasses.dataclass(frozen=True)
class PrimaryTriads:

	I: vocalprism.frameworks.IntervalTone
	IV: vocalprism.frameworks.IntervalTone
	V: vocalprism.frameworks.IntervalTone


@dataclasses.dataclass(frozen=True)
class WesternResult:

	key_signature: KeyReading
	vocal_category: VocalCategoryReading
	i_iv_v: PrimaryTriads
	a440: str
	equal_temperament: str
	insight: str


def key_signature (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> KeyReading:

	pc = vocalprism.pitch.freq_to_note_name(f0, a4).pc
	signature = vocalprism.bands.key_signature_for_pc(pc)

	return KeyReading(
		key=f"{signature.key} Major",
		sharps=signature.sharps,
		flats=signature.flats,
		signature=signature.signature,
		character=signature.character,
	)


def vocal_category (f0: float) -> VocalCategoryReading:

	"""Classify ``f0`` into a speaking-voice band (first matching band wins)."""

	table = vocalprism.bands.VOCAL_CATEGORIES
	band = table.nearest(f0)

	return VocalCategoryReading(
		category=band.value.category,
		range_note=band.value.range_note,
		description=band.value.description,
		lower_hz=band.lower,
		upper_hz=band.upper,
		position_in_range=band.percent(f0),
		in_range=table.lookup(f0) is not None,
	)


def primary_triads (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> PrimaryTriads:

	tone = vocalprism.frameworks.interval_tone

	return PrimaryTriads(
		I=tone(f0, vocalprism.frameworks.UNISON, "Unison", "Tonic", a4),
		IV=tone(f0, vocalprism.frameworks.PERFECT_FOURTH, "Perfect Fourth", "Subdominant", a4),
		V=tone(f0, vocalprism.frameworks.PERFECT_FIFTH, "Perfect Fifth", "Dominant", a4),
	)


def analyze_western (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> WesternResult:

	"""Western classical reading of ``f0``.

	Example:
		```python
		result = analyze_western(165.0)
		result.key_signature.key                  # "E Major"
		result.vocal_category.category            # "Tenor / Low Alto"
		result.i_iv_v.V.hz                        # 247.5
		```
	"""

	triads = primary_triads(f0, a4)
	progression = " - ".join(t.note.pitch_class for t in (triads.I, triads.IV, triads.V))

	return WesternResult(
		key_signature=key_signature(f0, a4),
		vocal_category=vocal_category(f0),
		i_iv_v=triads,
		a440=A440_NOTE,
		equal_temperament=EQUAL_TEMPERAMENT_NOTE,
		insight=(
			"The I-IV-V progression is the harmonic foundation of blues, rock, folk, country, "
			f"and most popular music. In your key: {progression}."
		),
	)
