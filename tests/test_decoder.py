"""Tests for docview.docs.decoder."""

import json

import pytest

from docview.docs.decoder import DocsDecodeError, decode_package, load_package


class TestDecodePackage:
    """Tests for decode_package()."""

    def test_decodes_every_entry_kind(self, sample_docs):
        (module,) = decode_package(sample_docs)
        assert module.name == "Geometry"
        assert [a.name for a in module.aliases] == ["Point"]
        assert module.aliases[0].type == "{ x : Basics.Float, y : Basics.Float }"
        assert [u.name for u in module.unions] == ["Shape"]
        assert module.unions[0].cases[0] == ("Circle", ["Geometry.Point", "Basics.Float"])
        assert [v.name for v in module.values] == ["origin", "<+>"]

    def test_binops_carry_fixity(self, sample_docs):
        (module,) = decode_package(sample_docs)
        op = module.values[1]
        assert (op.associativity, op.precedence) == ("left", 6)
        assert module.values[0].associativity is None

    def test_accepts_modules_wrapper(self, sample_docs):
        assert decode_package({"modules": sample_docs})[0].name == "Geometry"

    def test_unions_key(self):
        (module,) = decode_package([{"name": "M", "unions": [{"name": "T", "cases": []}]}])
        assert module.unions[0].name == "T"
        assert module.comment == ""

    def test_rejects_unsupported_structure(self):
        with pytest.raises(DocsDecodeError):
            decode_package({"name": "M"})

    def test_missing_field_names_its_path(self, sample_docs):
        del sample_docs[0]["values"][0]["type"]
        with pytest.raises(DocsDecodeError, match=r"\$\[0\]\.values\[0\]: missing field 'type'"):
            decode_package(sample_docs)

    def test_wrong_type(self):
        with pytest.raises(DocsDecodeError, match="expected str"):
            decode_package([{"name": "M", "values": [{"name": "x", "type": 3}]}])

    def test_bad_case_shape(self):
        with pytest.raises(DocsDecodeError, match="expected \\[tag, \\[types\\]\\]"):
            decode_package([{"name": "M", "types": [{"name": "T", "cases": [["A", "Int"]]}]}])

    def test_binop_requires_precedence(self):
        doc = [{"name": "M", "binops": [{"name": "+", "type": "a", "associativity": "left"}]}]
        with pytest.raises(DocsDecodeError, match="precedence"):
            decode_package(doc)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode_package("not docs")


class TestLoadPackage:
    """Tests for load_package()."""

    def test_reads_json_file(self, tmp_path, sample_docs):
        path = tmp_path / "documentation.json"
        path.write_text(json.dumps(sample_docs), encoding="utf-8")
        assert [m.name for m in load_package(path)] == ["Geometry"]
