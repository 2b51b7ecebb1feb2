import pytest

pygame = pytest.importorskip("pygame")

from pombo.data_models import GamePhase  # noqa: E402
from pombo.flappy_client import clamp_resize, dispatch_event  # noqa: E402

from conftest import make_pipe  # noqa: E402


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(10, 10))


@pytest.mark.parametrize("k", [pygame.K_SPACE, pygame.K_UP])
def test_activate_keys_start_then_flap(engine, k):
    assert dispatch_event(engine, key(k))
    assert engine.phase is GamePhase.ACTIVE

    dispatch_event(engine, key(k))
    assert engine.entity.velocity == -6.0


def test_left_click_activates(engine):
    dispatch_event(engine, click())
    assert engine.phase is GamePhase.ACTIVE


def test_other_buttons_and_keys_are_ignored(engine):
    dispatch_event(engine, click(button=3))
    dispatch_event(engine, key(pygame.K_a))
    assert engine.phase is GamePhase.IDLE


def test_click_on_celebration_only_dismisses(engine):
    engine.on_activate()
    engine.celebrating = True

    dispatch_event(engine, click())

    assert not engine.celebrating
    assert engine.entity.velocity == 0.0


def test_space_during_celebration_still_flaps(engine):
    engine.on_activate()
    engine.celebrating = True

    dispatch_event(engine, key(pygame.K_SPACE))

    assert engine.celebrating
    assert engine.entity.velocity == -6.0


def test_quit_and_escape_stop_the_loop(engine):
    assert not dispatch_event(engine, pygame.event.Event(pygame.QUIT))
    assert not dispatch_event(engine, key(pygame.K_ESCAPE))


def test_resize_is_clamped_before_reaching_engine(engine):
    engine.on_activate()
    engine.stream.pipes.append(make_pipe(300, 100))

    dispatch_event(engine, pygame.event.Event(pygame.VIDEORESIZE, w=320, h=200, size=(320, 200)))

    assert (engine.playfield.width, engine.playfield.height) == (320, 340)
    assert engine.phase is GamePhase.ACTIVE


def test_clamp_resize_keeps_large_windows(config):
    assert clamp_resize(config, 1024, 768) == (1024, 768)
    assert clamp_resize(config, 0, 0) == (1, 340)


def test_clamp_resize_with_fractional_gap_is_accepted_by_engine():
    from pombo.config import GameConfig
    from pombo.game_engine import GameEngine

    cfg = GameConfig(width=600, height=600, gap_size=240.5)
    engine = GameEngine(cfg)
    assert clamp_resize(cfg, 300, 100) == (300, 341)

    dispatch_event(engine, pygame.event.Event(pygame.VIDEORESIZE, w=300, h=100, size=(300, 100)))
    assert engine.playfield.height == 341


@pytest.fixture
def headless_client(monkeypatch):
    from pombo.config import GameConfig
    from pombo.flappy_client import FlappyClient

    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    client = FlappyClient(GameConfig(width=600, height=600))
    yield client
    pygame.quit()


def test_window_follows_clamped_playfield(headless_client):
    event = pygame.event.Event(pygame.VIDEORESIZE, w=320, h=200, size=(320, 200))

    assert headless_client.handle_event(event)

    assert headless_client.screen.get_size() == (320, 340)
    assert (headless_client.engine.playfield.width,
            headless_client.engine.playfield.height) == (320, 340)


def test_client_quits_on_escape(headless_client):
    assert not headless_client.handle_event(key(pygame.K_ESCAPE))
