"""
Tests for the sidebar descriptor view model.
"""

import msgspec
import pytest

from editor_sidebar.models import (
    DEV_TOOLS_BUTTON_ID,
    RELOAD_THEME_BUTTON_ID,
    ButtonListBlock,
    SidebarDescriptor,
    SidebarTab,
    SlidesBlock,
    decode_json,
    default_descriptor,
    encode_json,
    load_descriptor,
)


class TestDefaultDescriptor:

    def test_stock_tabs(self):
        descriptor = default_descriptor().validate()

        assert [tab.id for tab in descriptor.tabs] == [
            "sidebar-tab-introduction",
            "sidebar-tab-debugging",
        ]
        assert [tab.icon for tab in descriptor.tabs] == ["school", "ads_click"]

    def test_introduction_has_five_slides(self):
        block = default_descriptor().slides_block()

        assert isinstance(block, SlidesBlock)
        assert len(block.slides) == 5
        assert block.placeholder_id(0) == "introduction-slides-video-0"

    def test_development_buttons(self):
        tab = default_descriptor().tabs[1]

        assert isinstance(tab.content, ButtonListBlock)
        assert [b.id for b in tab.content.buttons] == [
            DEV_TOOLS_BUTTON_ID,
            RELOAD_THEME_BUTTON_ID,
        ]
        assert all(b.tooltip for b in tab.content.buttons)

    def test_element_ids(self):
        ids = default_descriptor().element_ids()

        assert ids[:4] == [
            "editor-sidebar-area",
            "show-sidebar-button",
            "hide-sidebar-button",
            "editor-sidebar-tabs",
        ]
        assert "introduction-slides-video-4" in ids
        assert len(ids) == len(set(ids))


class TestValidation:

    def test_duplicate_ids_rejected(self):
        descriptor = SidebarDescriptor(
            tabs=[
                SidebarTab(
                    id="hide-sidebar-button",
                    icon="school",
                    title="Clash",
                    content=ButtonListBlock(buttons=[]),
                ),
            ],
        )
        with pytest.raises(ValueError, match="hide-sidebar-button"):
            descriptor.validate()

    def test_no_slides_block(self):
        descriptor = SidebarDescriptor(tabs=[])
        assert descriptor.slides_block() is None
        assert descriptor.slides_tab() is None


class TestJson:

    def test_load_handwritten_descriptor(self, tmp_path):
        path = tmp_path / "sidebar.json"
        path.write_text(
            """
            {
              "tabs": [
                {
                  "id": "tab-intro",
                  "icon": "school",
                  "title": "Intro",
                  "content": {
                    "type": "slides",
                    "id": "intro-slides",
                    "slides": [{"caption": "One"}, {"caption": "Two"}]
                  }
                },
                {
                  "id": "tab-dev",
                  "icon": "code",
                  "title": "Dev",
                  "content": {
                    "type": "buttons",
                    "buttons": [{"id": "dev-tools-button", "icon": "code", "title": "Tools"}]
                  }
                }
              ]
            }
            """,
            encoding="utf-8",
        )

        descriptor = load_descriptor(path)

        assert descriptor.area_id == "editor-sidebar-area"
        assert [s.caption for s in descriptor.slides_block().slides] == ["One", "Two"]
        assert descriptor.tabs[1].content.buttons[0].tooltip == ""

    def test_encoded_default_decodes_equal(self):
        original = default_descriptor()
        decoded = decode_json(encode_json(original), type=SidebarDescriptor)
        assert decoded == original

    def test_unknown_block_type_rejected(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(
            '{"tabs": [{"id": "t", "icon": "x", "title": "T",'
            ' "content": {"type": "html", "body": ""}}]}',
            encoding="utf-8",
        )
        with pytest.raises(msgspec.ValidationError):
            load_descriptor(path)
