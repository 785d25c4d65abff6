"""Unit tests for DataEntryForm."""

import pytest

from recordkit.core.errors import OutOfBoundsError
from recordkit.core.models.domain import Incident, Plugin, User
from recordkit.web.html import CSRF_FIELD, DataEntryForm, InputCheckbox, InputNumber, InputSelect, InputText, InputTextArea


def saved_plugin() -> Plugin:
    return Plugin(
        {
            "id": 3,
            "name": "Foo",
            "seo_name": "foo",
            "vendor": "Acme",
            "class_path": "Plugins\\Acme\\Foo\\Plugin",
            "directory": "plugins/acme/foo",
            "priority": 20,
        }
    )


class TestColumns:
    def test_meta_hidden_and_protected_columns_are_left_out(self):
        assert "directory" not in DataEntryForm(saved_plugin()).columns()
        assert "id" not in DataEntryForm(saved_plugin()).columns()

        columns = DataEntryForm(User()).columns()
        assert "password" not in columns
        assert "data" not in columns
        assert columns[0] == "email"


class TestInputs:
    def test_text_input_with_max_length(self):
        component = DataEntryForm(saved_plugin()).render_input("vendor")

        assert isinstance(component, InputText)
        assert component.render() == (
            '<input id="vendor" name="vendor" class="form-control" type="text" value="Acme" maxlength="128" />'
        )

    def test_integer_column_becomes_number_input(self):
        component = DataEntryForm(saved_plugin()).render_input("priority")

        assert isinstance(component, InputNumber)
        assert 'value="20" min="0" max="100"' in component.render()

    def test_boolean_column_becomes_checkbox(self):
        component = DataEntryForm(saved_plugin()).render_input("menu_enabled")

        assert isinstance(component, InputCheckbox)
        assert component.checked

    def test_long_text_becomes_textarea(self):
        component = DataEntryForm(saved_plugin()).render_input("description")

        assert isinstance(component, InputTextArea)

    def test_choices_become_select(self):
        incident = Incident().set_severity("high")
        component = DataEntryForm(incident).render_input("severity")

        assert isinstance(component, InputSelect)
        assert '<option value="high" selected>high</option>' in component.render()

    def test_json_column_becomes_textarea(self):
        component = DataEntryForm(Incident().set_details({"ip": "127.0.0.1"})).render_input("details")

        assert isinstance(component, InputTextArea)
        assert "&#34;ip&#34;: &#34;127.0.0.1&#34;" in component.render()

    def test_readonly_columns_of_saved_entries(self):
        assert DataEntryForm(saved_plugin()).render_input("class_path").readonly
        assert not DataEntryForm(Plugin()).render_input("class_path").readonly

    def test_readonly_select_renders_disabled(self):
        incident = Incident({"id": 1, "severity": "low"})

        html = DataEntryForm(incident).render_input("severity").render()

        assert html.startswith('<select id="severity" name="severity" class="form-control" disabled>')


class TestRender:
    def test_full_form(self):
        html = DataEntryForm(saved_plugin()).set_action("/plugins/3").render()

        assert html.startswith('<form class="data-entry-form" method="post" accept-charset="utf-8" action="/plugins/3">')
        assert f'name="{CSRF_FIELD}"' in html
        assert '<div class="form-group"><label for="name">Name</label><input id="name" name="name"' in html
        assert html.endswith('<button class="btn btn-primary" type="submit">Save</button></form>')

    def test_labels_are_escaped(self):
        html = DataEntryForm(saved_plugin(), submit_label="<Save>").render()

        assert "&lt;Save&gt;</button>" in html

    def test_without_submit_button(self):
        assert "<button" not in DataEntryForm(saved_plugin(), submit_label=None).render()

    def test_rendering_twice_gives_the_same_form(self):
        form = DataEntryForm(saved_plugin())

        assert form.render() == form.render()


class TestApply:
    def test_submitted_values_go_through_setters(self):
        plugin = DataEntryForm(saved_plugin()).apply(
            {"name": " Foo Bar ", "vendor": "", "priority": "0", "menu_enabled": "1", CSRF_FIELD: "token"}
        )

        assert plugin.get_name() == "Foo Bar"
        assert plugin.get_seo_name() == "foo-bar"
        assert plugin.get_vendor() is None
        assert plugin.get_priority() == 50
        assert plugin.get_menu_enabled() is True
        assert plugin.get_web_enabled() is False
        assert plugin.is_modified()

    def test_readonly_columns_of_saved_entries_are_not_written(self):
        plugin = DataEntryForm(saved_plugin()).apply({"class_path": "Plugins\\Other\\Bar\\Plugin"})

        assert plugin.get_class_path() == "Plugins\\Acme\\Foo\\Plugin"

    def test_invalid_integer_raises(self):
        with pytest.raises(OutOfBoundsError, match="should be an integer"):
            DataEntryForm(saved_plugin()).apply({"priority": "high"})

    def test_json_columns_are_decoded(self):
        incident = DataEntryForm(Incident()).apply({"severity": "high", "details": '{"ip": "127.0.0.1"}'})

        assert incident.get("severity") == "high"
        assert incident.get_details() == {"ip": "127.0.0.1"}

    def test_invalid_json_raises(self):
        with pytest.raises(OutOfBoundsError, match="not valid JSON"):
            DataEntryForm(Incident()).apply({"details": "{broken"})
