import dataclasses

from analog_digital.main import App


def snapshot(scene):
    return ([dataclasses.astuple(e) for e in scene.eyes.eyes],
            [dataclasses.astuple(r) for r in scene.ripples.ripples])


def test_mode_switch_freezes_and_resumes_scene(tmp_path):
    app = App(config_path=str(tmp_path / "missing.yaml"), mode="digital", seed=3)
    for _ in range(40):
        app.step()
    digital = app.scenes["digital"]
    frozen = snapshot(digital)

    app.switch_mode()
    assert app.active == "analog"
    for _ in range(25):
        app.step()
    assert snapshot(digital) == frozen

    app.switch_mode()
    app.step()
    assert app.active == "digital"
    assert snapshot(digital) != frozen


def test_start_runs_requested_frames(tmp_path):
    app = App(config_path=str(tmp_path / "missing.yaml"), mode="analog", seed=1)

    app.start(max_frames=3)

    assert app.display.frames_sent == 3
    assert app.active == "analog"


def test_cycle_mode_alternates_scenes(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("mode:\n  initial: cycle\n  mode_seconds: 0\n")
    app = App(config_path=str(path), seed=2)
    assert app.active == "analog"

    app.start(max_frames=1)
    assert app.active == "digital"


def test_unknown_mode_falls_back_to_cycle(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("mode:\n  initial: teletext\n")

    app = App(config_path=str(path))

    assert app.active == "analog"
