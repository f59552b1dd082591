"""Reference tuning standards.

A reference pitch (the frequency of A4) decides how a frequency is *named*;
it never changes the just-intonation ratios applied to a person's f0. The
registry below is a closed set and is only ever passed into the pitch kernel
as its ``a4`` argument.

Example:
	```python
	import vocalprism.tuning

	verdi = vocalprism.tuning.get_tuning("A432")
	vocalprism.pitch.freq_to_note_name(165.0, verdi.a4)

	for row in vocalprism.tuning.compare_across_tunings(165.0):
		print(row.tuning.id, row.note_name, row.cents)
	```
"""

import dataclasses
import types
import typing

import vocalprism.pitch


@dataclasses.dataclass(frozen=True)
class TuningStandard:

	"""
	A named A4 reference pitch.

	Attributes:
		id: Registry key (e.g. ``"A440"``).
		name: Display name.
		a4: Frequency of A4 in Hz.
		description: Where the standard comes from.
		context: Where it is used.
	"""

	id: str
	name: str
	a4: float
	description: str
	context: str


DEFAULT_TUNING_ID = "A440"

TUNING_STANDARDS: typing.Mapping[str, TuningStandard] = types.MappingProxyType({
	standard.id: standard for standard in (
		TuningStandard(
			id="A440",
			name="Modern Standard (A=440)",
			a4=440.0,
			description="International standard since 1939 (ISO 16)",
			context="Most recorded music, modern orchestras, digital instruments",
		),
		TuningStandard(
			id="A432",
			name="Verdi Pitch (A=432)",
			a4=432.0,
			description='Advocated by Verdi, some claim "natural" properties',
			context="Historical interest, alternative tuning community",
		),
		TuningStandard(
			id="A415",
			name="Baroque Pitch (A=415)",
			a4=415.0,
			description="Common baroque tuning, ~1 semitone below modern",
			context="Period instrument performance, baroque music",
		),
		TuningStandard(
			id="A466",
			name="High Baroque (A=466)",
			a4=466.0,
			description="North German baroque organs",
			context="Some Bach organ works",
		),
		TuningStandard(
			id="A435",
			name="French Diapason (A=435)",
			a4=435.0,
			description="French standard from 1859",
			context="Historical French orchestras",
		),
		TuningStandard(
			id="A444",
			name="Scientific Pitch (C=256)",
			a4=444.0,
			description='Also called "Philosophical pitch"',
			context="Acoustics, some Waldorf education",
		),
	)
})


def get_tuning (tuning_id: str) -> TuningStandard:

	"""Return a tuning standard by id.

	Raises:
		ValueError: If the id is not in ``TUNING_STANDARDS``.

	Example:
		```python
		get_tuning("A432").a4  # 432.0
		```
	"""

	if tuning_id not in TUNING_STANDARDS:
		raise ValueError(
			f"Unknown tuning: {tuning_id!r}. Available: {sorted(TUNING_STANDARDS)}"
		)

	return TUNING_STANDARDS[tuning_id]


@dataclasses.dataclass(frozen=True)
class TuningReading:

	"""How one frequency is named under one tuning standard."""

	tuning: TuningStandard
	note_name: vocalprism.pitch.NoteName
	nearest_hz: float
	cents: float


def read_in_tuning (freq: float, tuning: TuningStandard) -> TuningReading:

	"""Name ``freq`` against ``tuning`` and measure its offset from the nearest pitch."""

	nearest = vocalprism.pitch.freq_to_nearest_standard(freq, tuning.a4)

	return TuningReading(
		tuning=tuning,
		note_name=vocalprism.pitch.freq_to_note_name(freq, tuning.a4),
		nearest_hz=nearest,
		cents=vocalprism.pitch.cents_between(freq, nearest),
	)


def compare_across_tunings (freq: float) -> typing.Tuple[TuningReading, ...]:

	"""Read one frequency under every registered tuning standard, in registry order."""

	return tuple(read_in_tuning(freq, tuning) for tuning in TUNING_STANDARDS.values())
