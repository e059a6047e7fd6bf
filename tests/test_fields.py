from gforms_gtm.fields import (
    decode_multiselect,
    expand_nested_keys,
    extract_field_values,
    set_path,
)
from gforms_gtm.types import FormField


def _field(**kw):
    return FormField.from_dict(kw)


def test_only_prepopulate_fields_are_extracted():
    fields = [
        _field(id="1", type="text", inputName="company", allowsPrepopulate=True),
        _field(id="2", type="text", inputName="ssn", allowsPrepopulate=False),
    ]
    entry = {"id": "9", "1": "Acme", "2": "123-45-6789"}
    values = extract_field_values(entry, fields)
    assert values == {"entry_id": "9", "company": "Acme"}
    assert "123-45-6789" not in values.values()


def test_core_meta_and_custom_prefix():
    entry = {
        "id": 3,
        "payment_status": "Paid",
        "currency": "",
        "transaction_id": None,
        "lvl:campaign": "spring",
        "source_url": "https://example.com",
    }
    values = extract_field_values(entry, [])
    assert values == {"entry_id": 3, "payment_status": "Paid", "campaign": "spring"}


def test_composite_fields_nest_by_type():
    fields = [
        _field(
            id="4",
            type="address",
            inputName="addr",
            allowsPrepopulate=True,
            inputs=[
                {"id": "4.3", "name": "city"},
                {"id": "4.5", "name": "zip"},
                {"id": "4.6", "name": "country"},
            ],
        ),
        _field(
            id="5",
            type="name",
            allowsPrepopulate=True,
            inputs=[{"id": "5.3", "name": "first"}, {"id": "5.6", "name": "last"}],
        ),
    ]
    entry = {"4.3": "Austin", "4.5": "78701", "4.6": "", "5.3": "Ada", "5.6": "Lovelace"}
    values = extract_field_values(entry, fields)
    assert values["address"] == {"city": "Austin", "zip": "78701"}
    assert values["name"] == {"first": "Ada", "last": "Lovelace"}


def test_other_composite_uses_input_name():
    fields = [
        _field(
            id="7",
            type="time",
            allowsPrepopulate=True,
            inputs=[{"id": "7.1", "name": "hour"}, {"id": "7.2", "name": "minute"}],
        )
    ]
    values = extract_field_values({"7.1": "10", "7.2": "30"}, fields)
    assert values == {"hour": "10", "minute": "30"}


def test_checkbox_values_accumulate_into_list():
    fields = [
        _field(
            id="6",
            type="checkbox",
            inputName="interests",
            allowsPrepopulate=True,
            inputs=[{"id": "6.1"}, {"id": "6.2"}, {"id": "6.3"}],
        )
    ]
    values = extract_field_values({"6.1": "seo", "6.2": "", "6.3": "ppc"}, fields)
    assert values == {"interests": ["seo", "ppc"]}


def test_single_checkbox_is_still_a_list():
    fields = [
        _field(
            id="6",
            type="checkbox",
            inputName="optin",
            allowsPrepopulate=True,
            inputs=[{"id": "6.1"}],
        )
    ]
    assert extract_field_values({"6.1": "yes"}, fields) == {"optin": ["yes"]}


def test_multiselect_is_decoded():
    fields = [
        _field(id="8", type="multiselect", inputName="services", allowsPrepopulate=True)
    ]
    values = extract_field_values({"8": '["a","b"]'}, fields)
    assert values == {"services": ["a", "b"]}


def test_decode_multiselect_legacy_csv():
    assert decode_multiselect("a, b,,c") == ["a", "b", "c"]
    assert decode_multiselect(["x"]) == ["x"]


def test_entry_is_not_mutated():
    fields = [_field(id="1", type="text", inputName="a.b", allowsPrepopulate=True)]
    entry = {"1": "v"}
    extract_field_values(entry, fields)
    assert entry == {"1": "v"}


def test_expand_nested_keys():
    assert expand_nested_keys({"a.b.c": 1}) == {"a": {"b": {"c": 1}}}
    assert expand_nested_keys({"a.b": 1, "a.c": 2}) == {"a": {"b": 1, "c": 2}}


def test_expand_nested_keys_leaves_nested_input_alone():
    nested = {"a": {"b": 1}, "c": [1, 2]}
    assert expand_nested_keys(nested) == nested
    assert expand_nested_keys(expand_nested_keys({"x.y": 1})) == {"x": {"y": 1}}


def test_expand_nested_keys_scalar_on_path_is_replaced():
    assert expand_nested_keys({"a": 1, "a.b": 2}) == {"a": {"b": 2}}
    assert expand_nested_keys({"a.b": 2, "a": 1}) == {"a": 1}


def test_set_path_returns_new_dicts():
    tree = {"a": {"b": 1}}
    out = set_path(tree, ["a", "c"], 2)
    assert out == {"a": {"b": 1, "c": 2}}
    assert tree == {"a": {"b": 1}}
