import json

import pytest

from acffields.core.contracts import Term
from acffields.core.exceptions import ProviderError
from acffields.providers.file_provider import FileFieldProvider
from acffields.reader import FieldReader


def _write_yaml(tmp_path):
    path = tmp_path / "fields.yaml"
    path.write_text(
        "\n".join(
            [
                "option:",
                "  site_tagline: Hello",
                "user_42:",
                "  nickname: ada",
                "  avatar: {value: 17, type: image, label: Avatar}",
                "category_7:",
                "  colour: teal",
                "12:",
                "  subtitle: Twelve",
            ]
        )
    )
    return path


def test_yaml_fixture_lookups(tmp_path):
    reader = FieldReader(FileFieldProvider(_write_yaml(tmp_path)))

    assert reader.get_option_fields() == {"site_tagline": "Hello"}
    assert reader.get_user_fields(42) == {"nickname": "ada", "avatar": 17}
    assert reader.get_taxonomy_fields(Term(term_id=7, taxonomy="category")) == {"colour": "teal"}
    assert reader.get_post_fields(12) == {"subtitle": "Twelve"}
    assert reader.get_widget_fields(1) == {}


def test_field_metadata_reaches_transform(tmp_path):
    seen = {}

    def transform(value, key, field, hook):
        seen[field.name] = (field.type, field.label)
        return value

    FieldReader(FileFieldProvider(_write_yaml(tmp_path)), transform=transform).get_user_fields(42)

    assert seen == {"nickname": (None, None), "avatar": ("image", "Avatar")}


def test_json_fixture(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps({"widget_text-2": {"title": {"value": "Hi", "type": "text"}}}))

    assert FieldReader(FileFieldProvider(path)).get_widget_fields("text-2") == {"title": "Hi"}


def test_fixture_is_reread_on_every_call(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps({"option": {"a": 1}}))
    reader = FieldReader(FileFieldProvider(path))

    assert reader.get_option_fields() == {"a": 1}
    path.write_text(json.dumps({"option": {"a": 2}}))
    assert reader.get_option_fields() == {"a": 2}


def test_empty_document_has_no_fields(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert FileFieldProvider(path).get_field_objects("option") is None


def test_missing_file_raises_provider_error(tmp_path):
    provider = FileFieldProvider(tmp_path / "missing.yaml")

    with pytest.raises(ProviderError, match="not found"):
        provider.get_field_objects("option")


def test_non_mapping_document_raises_provider_error(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ProviderError, match="must be a mapping"):
        FileFieldProvider(path).get_field_objects("option")


def test_missing_file_degrades_through_reader(tmp_path):
    reader = FieldReader(FileFieldProvider(tmp_path / "missing.yaml"), on_provider_error="allow")

    assert reader.get_option_fields() == {}
