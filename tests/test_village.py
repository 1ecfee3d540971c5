import pytest

from hamletkit.characters import NPC
from hamletkit.village import Village


@pytest.fixture
def warriors():
    return [
        NPC("Siegfried", 10, "warrior"),
        NPC("George", 12, "warrior"),
        NPC("Henry the Hotspur", 2, "warrior"),
        NPC("James", 5, "warrior"),
    ]


def test_default_village():
    village = Village()
    assert village.name == "Springfield"
    assert len(village) == 0


def test_named_village_with_inhabitants(warriors):
    village = Village("Stonetown", warriors)
    assert village.name == "Stonetown"
    assert list(village) == warriors


def test_add_inhabitant_keeps_reference(warriors):
    village = Village("Stonetown")
    for npc in warriors:
        village.add_inhabitant(npc)
    assert village[0] is warriors[0]
    village[0].health = 50
    assert warriors[0].health == 50


def test_remove_inhabitant(warriors):
    village = Village("Stonetown", warriors)
    village.remove_inhabitant(warriors[1])
    assert warriors[1] not in list(village)
    assert len(village) == len(warriors) - 1


def test_remove_uses_identity_not_name(warriors):
    village = Village("Stonetown", warriors)
    village.remove_inhabitant(NPC("George", 12, "warrior"))
    assert len(village) == len(warriors)


def test_remove_all_occurrences(warriors):
    village = Village("Stonetown", [warriors[0], warriors[1], warriors[0]])
    village.remove_inhabitant(warriors[0])
    assert list(village) == [warriors[1]]


def test_inhabitants_property_is_copy(warriors):
    village = Village("Stonetown", warriors)
    village.inhabitants.clear()
    assert len(village) == len(warriors)


def test_getitem_out_of_range():
    with pytest.raises(IndexError):
        Village()[0]


def test_sort_by_name(warriors):
    village = Village("Stonetown", warriors)
    village.sort_by_name()
    assert [npc.name for npc in village] == sorted(npc.name for npc in warriors)


def test_sort_by_power_level(warriors):
    village = Village("Stonetown", warriors)
    village.sort_by_power_level()
    levels = [npc.power_level for npc in village]
    assert levels == sorted(levels)
    assert {id(npc) for npc in village} == {id(npc) for npc in warriors}


def test_sort_empty_village():
    village = Village()
    village.sort_by_name()
    village.sort_by_power_level()
    assert list(village) == []