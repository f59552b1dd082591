import pytest

import vocalprism.bands
import vocalprism.ratios


def test_ratio_properties () -> None:

	fifth = vocalprism.ratios.Ratio(3, 2)

	assert fifth.decimal == 1.5
	assert fifth.cents == pytest.approx(701.955, abs=0.001)
	assert fifth.label == "3:2"
	assert fifth.of(100.0) == 150.0


def test_ratio_rejects_non_positive_terms () -> None:

	with pytest.raises(ValueError):
		vocalprism.ratios.Ratio(0, 1)

	with pytest.raises(ValueError):
		vocalprism.ratios.Ratio(3, -2)


def test_just_intonation_degrees () -> None:

	degrees = vocalprism.ratios.JUST_INTONATION

	assert [d.degree for d in degrees] == list(range(1, 9))
	assert [d.ratio.label for d in degrees] == ["1:1", "9:8", "5:4", "4:3", "3:2", "5:3", "15:8", "2:1"]
	assert degrees[0].svara == "Sa"
	assert degrees[-1].svara == "Sa'"


def test_shuddh_scale_matches_just_degrees () -> None:

	for code, degree in zip(vocalprism.ratios.SHUDDH_SCALE, vocalprism.ratios.JUST_INTONATION):
		assert vocalprism.ratios.JUST_INTONATION_RATIOS[code].ratio == degree.ratio


def test_shrutis_strictly_ascending () -> None:

	"""The 23 shruti positions run from 1:1 to 2:1 in rising order."""

	shrutis = vocalprism.ratios.SHRUTIS

	assert len(shrutis) == 23
	assert [s.number for s in shrutis] == list(range(1, 24))
	assert shrutis[0].ratio.decimal == 1.0
	assert shrutis[-1].ratio.decimal == 2.0
	assert shrutis[0].ratio.cents == 0.0
	assert shrutis[-1].ratio.cents == 1200.0

	for lower, upper in zip(shrutis, shrutis[1:]):
		assert lower.ratio.decimal < upper.ratio.decimal
		assert lower.ratio.cents < upper.ratio.cents


def test_shrutis_in_region () -> None:

	assert [s.number for s in vocalprism.ratios.shrutis_in_region("Pa")] == [14]
	assert [s.number for s in vocalprism.ratios.shrutis_in_region("Re")] == [2, 3, 4, 5]

	with pytest.raises(ValueError):
		vocalprism.ratios.shrutis_in_region("Xa")


def test_ragas_span_sa_to_upper_sa () -> None:

	for raga in vocalprism.ratios.RAGA_SHRUTIS:
		assert raga.shrutis[0] == 1
		assert raga.shrutis[-1] == 23
		assert list(raga.shrutis) == sorted(raga.shrutis)


def test_get_raga () -> None:

	assert vocalprism.ratios.get_raga("yaman").name == "Yaman"

	with pytest.raises(ValueError):
		vocalprism.ratios.get_raga("unknown")


def test_commas () -> None:

	assert vocalprism.ratios.PYTHAGOREAN_COMMA.ratio.cents == pytest.approx(23.46, abs=0.005)
	assert vocalprism.ratios.SYNTONIC_COMMA.ratio.cents == pytest.approx(21.51, abs=0.005)


def test_equal_temperament_table () -> None:

	steps = vocalprism.ratios.EQUAL_TEMPERAMENT

	assert len(steps) == 13
	assert steps[0].cents == 0.0
	assert steps[12].cents == 1200.0
	assert steps[12].ratio == 2.0
	assert steps[7].name == "Perfect 5th"


def test_circle_of_fifths_agrees_with_key_spelling () -> None:

	"""Each pitch class sits on the circle under its conventional major-key name."""

	for pc in range(12):
		position = vocalprism.ratios.circle_of_fifths_position(pc)
		assert vocalprism.ratios.CIRCLE_OF_FIFTHS[position] == vocalprism.bands.MAJOR_KEY_SPELLING[pc]


def test_tuning_comparison () -> None:

	rows = vocalprism.ratios.TUNING_COMPARISON

	assert len(rows) == 8

	third = rows[2]
	assert third.name == "Major 3rd"
	assert third.just.label == "5:4"
	assert third.pythagorean.label == "81:64"
	assert third.et_cents == 400.0
	assert third.et_ratio == pytest.approx(2 ** (4 / 12))
