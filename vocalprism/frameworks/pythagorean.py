"""Pythagorean framework - 6th century BCE, the birth of acoustic science.

Consonance from simple ratios: the pure fourth, fifth and octave above f0,
where f0 sits on the circle of fifths, and the comma that appears when
twelve pure fifths fail to close the circle.
"""

import dataclasses
import typing

import vocalprism.bands
import vocalprism.frameworks
import vocalprism.pitch
import vocalprism.ratios


INSIGHT = (
	"Pythagoras discovered that simple ratios create consonance. This is physics, not "
	"metaphysics: when two frequencies have a simple ratio, their waveforms align "
	"regularly, producing stability."
)


@dataclasses.dataclass(frozen=True)
class CirclePosition:

	"""
	Where f0's nearest pitch class sits on the circle of fifths.

	Attributes:
		note: Nearest pitch class, spelled with sharps (``"C#"``).
		key: Conventional major-key spelling of that pitch class (``"Db"``).
		position: Steps clockwise from C (0-11).
		accidentals: Number of sharps or flats in the major key signature.
		accidental_type: ``"sharps"``, ``"flats"`` or ``"none"``.
	"""

	note: str
	key: str
	position: int
	accidentals: int
	accidental_type: str


@dataclasses.dataclass(frozen=True)
class CommaReading:

	ratio: vocalprism.ratios.Ratio
	cents: float
	description: str


@dataclasses.dataclass(frozen=True)
class PythagoreanIntervals:

	unison: vocalprism.frameworks.IntervalTone
	fourth: vocalprism.frameworks.IntervalTone
	fifth: vocalprism.frameworks.IntervalTone
	octave: vocalprism.frameworks.IntervalTone


@dataclasses.dataclass(frozen=True)
class PythagoreanResult:

	circle_position: CirclePosition
	comma: CommaReading
	intervals: PythagoreanIntervals
	insight: str


def circle_position (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> CirclePosition:

	"""Locate the pitch class nearest ``f0`` on the circle of fifths."""

	pc = vocalprism.pitch.freq_to_note_name(f0, a4).pc
	signature = vocalprism.bands.key_signature_for_pc(pc)

	if signature.sharps:
		accidentals, accidental_type = signature.sharps, "sharps"
	elif signature.flats:
		accidentals, accidental_type = signature.flats, "flats"
	else:
		accidentals, accidental_type = 0, "none"

	return CirclePosition(
		note=vocalprism.pitch.NOTE_NAMES[pc],
		key=signature.key,
		position=vocalprism.ratios.circle_of_fifths_position(pc),
		accidentals=accidentals,
		accidental_type=accidental_type,
	)


def pythagorean_comma () -> CommaReading:

	"""The Pythagorean comma, with cents rounded to two decimals (23.46)."""

	comma = vocalprism.ratios.PYTHAGOREAN_COMMA

	return CommaReading(
		ratio=comma.ratio,
		cents=round(comma.ratio.cents, 2),
		description=comma.description,
	)


def analyze_pythagorean (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> PythagoreanResult:

	"""Pythagorean reading of ``f0``.

	Example:
		```python
		result = analyze_pythagorean(100.0)
		result.comma.cents         # 23.46
		result.intervals.fifth.hz  # 150.0
		```
	"""

	tone = vocalprism.frameworks.interval_tone

	return PythagoreanResult(
		circle_position=circle_position(f0, a4),
		comma=pythagorean_comma(),
		intervals=PythagoreanIntervals(
			unison=tone(f0, vocalprism.frameworks.UNISON, "Unison", a4=a4),
			fourth=tone(f0, vocalprism.frameworks.PERFECT_FOURTH, "Perfect Fourth", a4=a4),
			fifth=tone(f0, vocalprism.frameworks.PERFECT_FIFTH, "Perfect Fifth", a4=a4),
			octave=tone(f0, vocalprism.frameworks.OCTAVE, "Octave", a4=a4),
		),
		insight=INSIGHT,
	)
