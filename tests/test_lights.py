from unison2d.color import Color
from unison2d.lights import DirectionalLight, LightId, PointLight, ShadowSettings
from unison2d.occluder import ShadowFilter
from unison2d.vec2 import Vec2


def test_shadow_settings_defaults():
    s = ShadowSettings()
    assert s.filter is ShadowFilter.NONE
    assert s.strength == 1.0
    assert s.distance == 0.0
    assert s.attenuation == 1.0


def test_hard_equals_default():
    assert ShadowSettings.hard() == ShadowSettings()


def test_soft_uses_pcf5_and_default_rest():
    s = ShadowSettings.soft()
    assert s.filter is ShadowFilter.PCF5
    assert (s.strength, s.distance, s.attenuation) == (1.0, 0.0, 1.0)


def test_point_light_shadows_off_by_default():
    light = PointLight(Vec2(1.0, 2.0), Color.RED, 2.0, 5.0)
    assert light.casts_shadows is False
    assert light.shadow == ShadowSettings()
    assert light.position == Vec2(1.0, 2.0)
    assert light.radius == 5.0


def test_point_lights_have_independent_shadow_settings():
    first = PointLight(Vec2.ZERO, Color.WHITE, 1.0, 1.0)
    second = PointLight(Vec2.ZERO, Color.WHITE, 1.0, 1.0)
    first.shadow.strength = 0.25
    assert second.shadow.strength == 1.0


def test_directional_light_defaults():
    light = DirectionalLight(Vec2.DOWN, Color.WHITE, 0.5)
    assert light.casts_shadows is False
    assert light.shadow.filter is ShadowFilter.NONE
    assert light.direction == Vec2.DOWN


def test_light_id_equality_and_hash():
    assert LightId(3) == LightId(3)
    assert LightId(3) != LightId(4)
    assert len({LightId(1), LightId(1), LightId(2)}) == 2