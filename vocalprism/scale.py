"""Personal just-intonation scale.

Treats f0 as Sa (the tonic) and builds the 8-degree shuddh scale on it with
5-limit ratios, then measures each degree against the nearest
equal-tempered pitch under the chosen reference tuning.
"""

import dataclasses
import typing

import vocalprism.pitch
import vocalprism.ratios


@dataclasses.dataclass(frozen=True)
class ScaleDegree:

	"""
	One degree of a personal scale.

	Attributes:
		degree: 1-8 (1 = Sa, 8 = Sa' an octave above).
		svara: Indian name of the degree (``"Sa"``, ``"Re"``, ...).
		solfege: Western solfège name (``"Do"``, ``"Re"``, ...).
		interval_name: Interval above the tonic (``"Perfect Fifth"``).
		ratio: Exact just-intonation ratio above the tonic.
		hz: ``f0 * ratio``.
		nearest_pitch: Name of the nearest equal-tempered pitch.
		nearest_pitch_hz: Frequency of that pitch.
		cents: Deviation of ``hz`` from ``nearest_pitch_hz`` (positive = sharp).
	"""

	degree: int
	svara: str
	solfege: str
	interval_name: str
	ratio: vocalprism.ratios.Ratio
	hz: float
	nearest_pitch: vocalprism.pitch.NoteName
	nearest_pitch_hz: float
	cents: float


def build_degree (f0: float, just: vocalprism.ratios.JustDegree, a4: float = vocalprism.pitch.DEFAULT_A4) -> ScaleDegree:

	"""Place one just-intonation degree above ``f0``."""

	hz = just.ratio.of(f0)
	nearest_hz = vocalprism.pitch.freq_to_nearest_standard(hz, a4)

	return ScaleDegree(
		degree=just.degree,
		svara=just.svara,
		solfege=just.solfege,
		interval_name=just.interval_name,
		ratio=just.ratio,
		hz=hz,
		nearest_pitch=vocalprism.pitch.freq_to_note_name(hz, a4),
		nearest_pitch_hz=nearest_hz,
		cents=vocalprism.pitch.cents_between(hz, nearest_hz),
	)


def generate_scale (f0: float, a4: float = vocalprism.pitch.DEFAULT_A4) -> typing.Tuple[ScaleDegree, ...]:

	"""Build the 8-degree just-intonation scale on ``f0``.

	Parameters:
		f0: Fundamental frequency in Hz, used as Sa.
		a4: Reference pitch used only for naming and cent deviations.

	Returns:
		Eight :class:`ScaleDegree` records ordered by degree. Degree 8 is
		always exactly twice degree 1.

	Example:
		```python
		scale = generate_scale(165.0)
		scale[4].svara  # "Pa"
		scale[4].hz     # 247.5
		```
	"""

	return tuple(build_degree(f0, just, a4) for just in vocalprism.ratios.JUST_INTONATION)
