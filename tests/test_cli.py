import json
import pathlib

import mido
import pytest

import vocalprism.__main__
import vocalprism.osc
import vocalprism.verification


def test_summary_output (capsys: pytest.CaptureFixture) -> None:

	assert vocalprism.__main__.main(["165"]) == 0

	out = capsys.readouterr().out
	assert out.startswith("E3  165.0 Hz")
	assert "Tenor / Low Alto voice at 165.0 Hz (E3), Phrygian mode." in out
	assert "Personal scale" in out
	assert "Across tunings" in out


def test_json_output (capsys: pytest.CaptureFixture) -> None:

	assert vocalprism.__main__.main(["165", "--format", "json"]) == 0

	data = json.loads(capsys.readouterr().out)
	assert data["input"]["nearest_pitch"] == "E3"
	assert len(data["scale"]) == 8


def test_tuning_option (capsys: pytest.CaptureFixture) -> None:

	assert vocalprism.__main__.main(["432", "--tuning", "A432", "--format", "json"]) == 0

	data = json.loads(capsys.readouterr().out)
	assert data["input"]["a4"] == 432.0
	assert data["input"]["cents"] == pytest.approx(0.0, abs=1e-9)


def test_out_of_range_f0 (capsys: pytest.CaptureFixture) -> None:

	assert vocalprism.__main__.main(["20"]) == 2
	assert capsys.readouterr().out == ""


def test_verify (capsys: pytest.CaptureFixture) -> None:

	assert vocalprism.__main__.main(["165", "--verify"]) == 0
	assert capsys.readouterr().out.count("PASS") == 9


def test_verify_failure_exits_1 (monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:

	failing = vocalprism.verification.VerificationCheck("Octave -> 1100 cents", 1100, 1200, 0.01, False)
	monkeypatch.setattr(vocalprism.verification, "verify_math", lambda: (failing,))

	assert vocalprism.__main__.main(["165", "--verify"]) == 1
	assert "FAIL  Octave -> 1100 cents" in capsys.readouterr().out


def test_midi_option (tmp_path: pathlib.Path) -> None:

	"""--midi writes the eight-note scale run followed by the three-note I-IV-V chord."""

	filename = tmp_path / "prism.mid"

	assert vocalprism.__main__.main(["165", "--midi", str(filename)]) == 0

	loaded = mido.MidiFile(filename)
	note_ons = [m for m in loaded.tracks[0] if m.type == "note_on"]
	assert len(note_ons) == 11


def test_midi_write_failure (tmp_path: pathlib.Path) -> None:

	assert vocalprism.__main__.main(["165", "--midi", str(tmp_path / "missing" / "prism.mid")]) == 1


def test_osc_option (patch_osc, monkeypatch: pytest.MonkeyPatch) -> None:

	monkeypatch.setattr(vocalprism.osc.time, "sleep", lambda seconds: None)

	assert vocalprism.__main__.main(["165", "--osc"]) == 0

	sent = patch_osc.instances[-1].sent
	assert sent[0][0] == "/vocalprism/prism"
	assert [address for address, _ in sent[1:]] == ["/vocalprism/tone"] * 8


def test_config_file (tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:

	path = tmp_path / "vocalprism.yaml"
	path.write_text("tuning: A415\noutput:\n  format: json\n")

	assert vocalprism.__main__.main(["165", "--config", str(path)]) == 0
	assert json.loads(capsys.readouterr().out)["input"]["a4"] == 415.0


def test_command_line_overrides_config (tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:

	path = tmp_path / "vocalprism.yaml"
	path.write_text("tuning: A415\noutput:\n  format: json\n")

	assert vocalprism.__main__.main(["165", "--config", str(path), "--tuning", "A440"]) == 0
	assert json.loads(capsys.readouterr().out)["input"]["a4"] == 440.0


def test_invalid_config (tmp_path: pathlib.Path) -> None:

	path = tmp_path / "vocalprism.yaml"
	path.write_text("tuning: A999\n")

	assert vocalprism.__main__.main(["165", "--config", str(path)]) == 2


@pytest.mark.parametrize("text", [
	"output: json\n",
	"midi: [1, 2]\n",
	"osc:\n  port: null\n",
	"midi: [1, 2\n",
])
def test_malformed_config_exits_with_2 (tmp_path: pathlib.Path, text: str) -> None:

	path = tmp_path / "vocalprism.yaml"
	path.write_text(text)

	assert vocalprism.__main__.main(["165", "--config", str(path)]) == 2
