"""
Framework analyzers - six musicological readings of the same f0.

Each submodule exposes one pure ``analyze_*`` function returning a frozen
result record. Analyzers never call each other; they share only the pitch
kernel and the static tables.
"""

import dataclasses
import types
import typing

import vocalprism.pitch
import vocalprism.ratios


@dataclasses.dataclass(frozen=True)
class FrameworkInfo:

	"""Display metadata for one framework."""

	id: str
	number: str
	title: str
	era: str
	tagline: str


FRAMEWORK_INFO: typing.Mapping[str, FrameworkInfo] = types.MappingProxyType({
	info.id: info for info in (
		FrameworkInfo("pythagorean", "01", "Pythagorean", "6th Century BCE", "The birth of acoustic science"),
		FrameworkInfo("vedic", "02", "Vedic / Indian Classical", "c. 200 BCE", "The voice-centered tradition"),
		FrameworkInfo("gregorian", "03", "Gregorian / Medieval", "9th Century CE", "Sacred sound in the West"),
		FrameworkInfo("western", "04", "Western Classical", "1600s-Present", "The common practice tradition"),
		FrameworkInfo("tibetan", "05", "Tibetan / Overtone", "Ancient", "The physics of resonance"),
		FrameworkInfo("neuroscience", "06", "Neuroscience", "Modern", "Brainwave entrainment"),
	)
})


@dataclasses.dataclass(frozen=True)
class IntervalTone:

	"""
	A pitch a fixed ratio above f0.

	Attributes:
		name: Interval name (``"Perfect Fifth"``).
		role: What the tone does in its framework (``"Dominant"``, ``"Parallel fifth above"``).
		ratio: Exact ratio above f0.
		hz: ``f0 * ratio``.
		note: Name of the nearest equal-tempered pitch.
	"""

	name: str
	role: str
	ratio: vocalprism.ratios.Ratio
	hz: float
	note: vocalprism.pitch.NoteName


def interval_tone (
	f0: float,
	ratio: vocalprism.ratios.Ratio,
	name: str,
	role: str = "",
	a4: float = vocalprism.pitch.DEFAULT_A4
) -> IntervalTone:

	"""Place a tone ``ratio`` above ``f0`` and name it."""

	hz = ratio.of(f0)

	return IntervalTone(
		name=name,
		role=role,
		ratio=ratio,
		hz=hz,
		note=vocalprism.pitch.freq_to_note_name(hz, a4),
	)


UNISON = vocalprism.ratios.Ratio(1, 1)
PERFECT_FOURTH = vocalprism.ratios.Ratio(4, 3)
PERFECT_FIFTH = vocalprism.ratios.Ratio(3, 2)
OCTAVE = vocalprism.ratios.Ratio(2, 1)
