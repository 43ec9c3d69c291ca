import pytest

from relkit.dif import DifType, ObjectDifFeatures


@pytest.mark.parametrize("dif_type", list(DifType))
def test_parse_round_trip(dif_type):
    assert DifType.parse(str(dif_type)) is dif_type


@pytest.mark.parametrize(
    "name,expected",
    [
        ("dsym", DifType.DSYM),
        ("elf", DifType.ELF),
        ("pe", DifType.PE),
        ("pdb", DifType.PDB),
        ("sourcebundle", DifType.SOURCE_BUNDLE),
        ("breakpad", DifType.BREAKPAD),
        ("proguard", DifType.PROGUARD),
        ("wasm", DifType.WASM),
    ],
)
def test_parse_names(name, expected):
    assert DifType.parse(name) is expected


@pytest.mark.parametrize("name", ["", "DSYM", "macho", "source_bundle"])
def test_parse_invalid(name):
    with pytest.raises(ValueError, match="Invalid debug info file type"):
        DifType.parse(name)


def test_str_of_source_bundle():
    parsed = DifType.parse("sourcebundle")
    assert str(parsed) == "sourcebundle"


def test_features_all_str():
    assert str(ObjectDifFeatures.all()) == "symtab, debug, unwind, sources"


def test_features_none_str():
    assert str(ObjectDifFeatures.none()) == "none"


def test_features_partial_str():
    features = ObjectDifFeatures(debug=True, symtab=False, unwind=True, sources=False)
    assert str(features) == "debug, unwind"


def test_features_single_str():
    features = ObjectDifFeatures(debug=False, symtab=True, unwind=False, sources=False)
    assert str(features) == "symtab"


def test_default_is_all():
    assert ObjectDifFeatures() == ObjectDifFeatures.all()


def test_has_some():
    assert ObjectDifFeatures.all().has_some() is True
    assert ObjectDifFeatures.none().has_some() is False
    assert ObjectDifFeatures(debug=False, symtab=False, unwind=False, sources=True).has_some() is True