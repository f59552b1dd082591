import math

import pytest

import vocalprism.bands


TABLES = (
	vocalprism.bands.VOCAL_CATEGORIES,
	vocalprism.bands.SAPTAKS,
	vocalprism.bands.CHAKRAS,
	vocalprism.bands.BOWL_SIZES,
	vocalprism.bands.BRAINWAVE_BANDS,
)


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.name)
def test_tables_partition_their_domain (table: vocalprism.bands.BandTable) -> None:

	"""Every edge and every midpoint falls in exactly one band."""

	assert table.is_partition()

	for band in table:

		assert table.matches(band.lower) == 1

		if math.isfinite(band.upper):
			assert table.matches((band.lower + band.upper) / 2) == 1
		else:
			assert table.matches(band.lower + 1000.0) == 1


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.name)
def test_every_value_in_domain_has_one_band (table: vocalprism.bands.BandTable) -> None:

	"""A fine sweep across the domain, edges included, always finds exactly one band."""

	lower, upper = table.domain
	top = upper if math.isfinite(upper) else table[-1].lower * 4 + 100.0
	steps = 5000

	values = [lower + (top - lower) * i / steps for i in range(steps)]
	values += [band.lower for band in table] + [math.nextafter(band.upper, -math.inf) for band in table if math.isfinite(band.upper)]

	for value in values:
		assert table.matches(value) == 1
		assert table.lookup(value) is not None


def test_boundary_belongs_to_upper_band () -> None:

	"""Bands are half-open, so exactly 100 Hz is Baritone rather than Bass."""

	table = vocalprism.bands.VOCAL_CATEGORIES

	assert table.lookup(100.0).value.category == "Baritone"
	assert table.lookup(99.99).value.category == "Bass"


def test_lookup_outside_domain () -> None:

	table = vocalprism.bands.VOCAL_CATEGORIES

	assert table.domain == (65.0, 400.0)
	assert table.lookup(64.9) is None
	assert table.lookup(400.0) is None
	assert table.index_of(400.0) is None


def test_nearest_clamps_to_edge_bands () -> None:

	table = vocalprism.bands.VOCAL_CATEGORIES

	assert table.nearest(50.0).value.category == "Bass"
	assert table.nearest(400.0).value.category == "High Soprano"
	assert table.nearest(900.0).value.category == "High Soprano"


def test_band_percent () -> None:

	band = vocalprism.bands.Band(140.0, 180.0, "Tenor")

	assert band.percent(165.0) == 62.5
	assert band.percent(100.0) == 0.0
	assert band.percent(500.0) == 100.0
	assert vocalprism.bands.Band(0.0, math.inf, "open").percent(10.0) == 0.0


def test_band_table_rejects_gaps_and_overlaps () -> None:

	Band = vocalprism.bands.Band

	with pytest.raises(ValueError):
		vocalprism.bands.BandTable("gap", [Band(0.0, 1.0, "a"), Band(2.0, 3.0, "b")])

	with pytest.raises(ValueError):
		vocalprism.bands.BandTable("overlap", [Band(0.0, 2.0, "a"), Band(1.0, 3.0, "b")])

	with pytest.raises(ValueError):
		vocalprism.bands.BandTable("empty", [])

	with pytest.raises(ValueError):
		vocalprism.bands.BandTable("inverted", [Band(3.0, 1.0, "a")])


def test_band_table_sequence_protocol () -> None:

	table = vocalprism.bands.SAPTAKS

	assert len(table) == 3
	assert table[1].value.name == "Madhya Saptak"
	assert [band.value.name for band in table][0] == "Mandra Saptak"


def test_chakra_and_bowl_lookup () -> None:

	assert vocalprism.bands.CHAKRAS.nearest(165.0).value.name == "Heart (Anahata)"
	assert vocalprism.bands.CHAKRAS.nearest(500.0).value.name == "Crown (Sahasrara)"
	assert vocalprism.bands.BOWL_SIZES.nearest(300.0).value.size == "Small"


def test_brainwave_bands () -> None:

	table = vocalprism.bands.BRAINWAVE_BANDS

	assert table.lookup(0.4) is None
	assert table.lookup(4.0).value.key == "theta"
	assert table.lookup(45.0).value.key == "gamma"


def test_mode_for_pitch_class () -> None:

	"""Sharpened pitch classes take the mode of their natural letter."""

	assert vocalprism.bands.mode_for_pc(4).mode == "Phrygian"
	assert vocalprism.bands.mode_for_pc(1).mode == "Ionian (Major)"
	assert vocalprism.bands.mode_for_pc(6).mode == "Lydian"


def test_key_signature_for_pitch_class () -> None:

	assert vocalprism.bands.key_signature_for_pc(4).key == "E"
	assert vocalprism.bands.key_signature_for_pc(4).sharps == 4

	d_flat = vocalprism.bands.key_signature_for_pc(1)
	assert d_flat.key == "Db"
	assert d_flat.flats == 5

	assert vocalprism.bands.key_signature_for_pc(3).key == "Eb"
	assert vocalprism.bands.key_signature_for_pc(10).key == "Bb"


def test_every_pitch_class_has_a_mode_and_key () -> None:

	keys = set()

	for pc in range(12):
		assert vocalprism.bands.mode_for_pc(pc).final in "CDEFGAB"
		keys.add(vocalprism.bands.key_signature_for_pc(pc).key)

	assert len(keys) == 12
