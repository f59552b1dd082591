"""Gregorian / medieval framework - 9th century CE, sacred sound in the West.

f0 is treated as the *final* (home note) of a church mode chosen by its
nearest natural letter, and the parallel organum voices a fourth and a
fifth above it are derived from pure ratios.
"""

import dataclasses

import vocalprism.bands
import vocalprism.frameworks
import vocalprism.pitch


INSIGHT = (
	"Medieval monks used parallel fourths and fifths because they're the most consonant "
	"intervals, the same ratios Pythagoras identified. Sacred music used consonance to "
	"create states of contemplation."
)

DIABOLUS = (
	"The tritone (augmented fourth) was called 'the devil in music', not from superstition, "
	"but because it's the most acoustically dissonant interval."
)

ISON = (
	"Some chant traditions used a sustained drone under the melody, functionally identical "
	"to the Indian tanpura."
)


@dataclasses.dataclass(frozen=True)
class Organum:

	vox_principalis: vocalprism.frameworks.IntervalTone
	parallel_fourth: vocalprism.frameworks.IntervalTone
	parallel_fifth: vocalprism.frameworks.IntervalTone


@dataclasses.dataclass(frozen=True)
class GregorianResult:

	mode: vocalprism.bands.Mode
	organum: Organum
	diabolus: str
	ison: str
	insight: str


def organum (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> Organum:

	"""Principal voice on ``f0`` with parallel voices a pure fourth and fifth above."""

	tone = vocalprism.frameworks.interval_tone

	return Organum(
		vox_principalis=tone(f0, vocalprism.frameworks.UNISON, "Unison", "Main voice (vox principalis)", a4),
		parallel_fourth=tone(f0, vocalprism.frameworks.PERFECT_FOURTH, "Perfect Fourth", "Parallel fourth above", a4),
		parallel_fifth=tone(f0, vocalprism.frameworks.PERFECT_FIFTH, "Perfect Fifth", "Parallel fifth above", a4),
	)


def analyze_gregorian (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> GregorianResult:

	"""Gregorian reading of ``f0``: modal character plus organum voices."""

	pc = vocalprism.pitch.freq_to_note_name(f0, a4).pc

	return GregorianResult(
		mode=vocalprism.bands.mode_for_pc(pc),
		organum=organum(f0, a4),
		diabolus=DIABOLUS,
		ison=ISON,
		insight=INSIGHT,
	)
