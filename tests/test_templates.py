import pytest

from delve.enemies import choose_template, load_monster_templates, spawn_monster
from delve.errors import ConfigError
from delve.state.actors import DeathPolicy

from conftest import ORC, ScriptedRng


def test_packaged_templates():
    templates = load_monster_templates()
    orc, troll = templates["orc"], templates["troll"]
    assert (orc.glyph, orc.color, orc.hp, orc.defense, orc.power) == ("o", (63, 127, 63), 10, 0, 3)
    assert (troll.glyph, troll.color, troll.hp, troll.defense, troll.power) == ("T", (0, 127, 0), 16, 1, 4)
    assert (orc.weight, troll.weight) == (80, 20)


@pytest.mark.parametrize("roll, expected", [(0.0, "orc"), (0.79, "orc"), (0.8, "troll"), (0.999, "troll")])
def test_choose_template_uses_one_roll(templates, roll, expected):
    rng = ScriptedRng(floats=[roll])
    assert choose_template(rng, templates).id == expected
    assert not rng.floats


def test_choose_template_needs_candidates():
    with pytest.raises(ValueError):
        choose_template(ScriptedRng(floats=[0.5]), [])


@pytest.mark.parametrize(
    "text",
    [
        "id: orc\n",
        "- id: orc\n  color: [1, 2\n",  # not YAML at all
        "[]\n",
        "- id: orc\n  glyph: o\n  color: [1, 2, 3]\n  hp: 10\n",  # no power
        "- id: orc\n  glyph: o\n  color: [1, 2, 3]\n  hp: lots\n  power: 3\n",
    ],
)
def test_malformed_template_file(tmp_path, text):
    path = tmp_path / "monsters.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_monster_templates(path)


def test_missing_template_file(tmp_path):
    with pytest.raises(ConfigError):
        load_monster_templates(tmp_path / "absent.yaml")


def test_spawn_monster():
    orc = spawn_monster(ORC, (4, 5))
    assert orc.name == "orc"
    assert orc.pos == (4, 5)
    assert orc.glyph == "o"
    assert orc.blocks and orc.alive
    assert orc.fighter.hp == orc.fighter.max_hp == 10
    assert orc.fighter.on_death is DeathPolicy.MONSTER
    assert orc.ai is not None
