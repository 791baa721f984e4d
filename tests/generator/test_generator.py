"""Tests for SubThemeGenerator: path renames, token rewrites, template rendering."""

import pytest

from emulsify_tools.errors import CustomizeFailed
from emulsify_tools.generator import SubThemeGenerator


def _copied_recipe(tmp_path):
    theme = tmp_path / "my_theme"
    (theme / "config" / "install").mkdir(parents=True)
    (theme / "whisk.info.yml").write_text(
        "name: Whisk\ntype: theme\nbase theme: emulsify\nlibraries:\n  - whisk/global\n"
    )
    (theme / "whisk.theme").write_text("<?php\n\nfunction whisk_preprocess_page(&$variables) {}\n")
    (theme / "package.json").write_text('{"name": "whisk", "description": "Whisk starter"}\n')
    (theme / "config" / "install" / "whisk.settings.yml").write_text("logo: whisk.svg\n")
    (theme / "components").mkdir()
    (theme / "components" / "whisk-card.twig").write_text("{{ whisk }}")
    return theme


@pytest.mark.unit
class TestRenamePaths:

    def test_renames_files_named_after_starter(self, tmp_path):
        theme = _copied_recipe(tmp_path)
        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert (theme / "my_theme.info.yml").is_file()
        assert (theme / "my_theme.theme").is_file()
        assert not (theme / "whisk.info.yml").exists()

    def test_renames_nested_files(self, tmp_path):
        theme = _copied_recipe(tmp_path)
        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert (theme / "config" / "install" / "my_theme.settings.yml").is_file()
        assert (theme / "components" / "my_theme-card.twig").is_file()

    def test_renames_directories(self, tmp_path):
        theme = tmp_path / "my_theme"
        (theme / "whisk_assets").mkdir(parents=True)
        (theme / "whisk_assets" / "whisk.css").write_text("body {}")

        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert (theme / "my_theme_assets" / "my_theme.css").read_text() == "body {}"

    def test_leaves_node_modules_alone(self, tmp_path):
        theme = tmp_path / "my_theme"
        (theme / "node_modules" / "whisk").mkdir(parents=True)

        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert (theme / "node_modules" / "whisk").is_dir()


@pytest.mark.unit
class TestReplaceTokens:

    def test_rewrites_name_and_machine_name_in_info_file(self, tmp_path):
        theme = _copied_recipe(tmp_path)
        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        info = (theme / "my_theme.info.yml").read_text()
        assert "name: My Theme\n" in info
        assert "  - my_theme/global\n" in info
        assert "base theme: emulsify\n" in info

    def test_rewrites_theme_hooks(self, tmp_path):
        theme = _copied_recipe(tmp_path)
        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert "function my_theme_preprocess_page" in (theme / "my_theme.theme").read_text()

    def test_rewrites_package_json(self, tmp_path):
        theme = _copied_recipe(tmp_path)
        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert (theme / "package.json").read_text() == (
            '{"name": "my_theme", "description": "My Theme starter"}\n'
        )

    def test_does_not_rewrite_twig_templates(self, tmp_path):
        theme = _copied_recipe(tmp_path)
        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert (theme / "components" / "my_theme-card.twig").read_text() == "{{ whisk }}"

    def test_display_name_containing_machine_token_is_not_rewritten_twice(self, tmp_path):
        theme = _copied_recipe(tmp_path)
        SubThemeGenerator().generate(str(theme), "big_whisk", "Big whisk")

        assert "name: Big whisk\n" in (theme / "big_whisk.info.yml").read_text()

    def test_skips_files_that_are_not_utf8(self, tmp_path):
        theme = tmp_path / "my_theme"
        theme.mkdir()
        (theme / "notes.md").write_bytes(b"\xff\xfe whisk")

        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert (theme / "notes.md").read_bytes() == b"\xff\xfe whisk"

    def test_custom_starter_tokens(self, tmp_path):
        theme = tmp_path / "my_theme"
        theme.mkdir()
        (theme / "starter.info.yml").write_text("name: Starter\n")

        SubThemeGenerator(starter_machine_name="starter", starter_name="Starter").generate(
            str(theme), "my_theme", "My Theme",
        )

        assert (theme / "my_theme.info.yml").read_text() == "name: My Theme\n"


@pytest.mark.unit
class TestRenderTemplates:

    def test_renders_j2_files_and_removes_template(self, tmp_path):
        theme = tmp_path / "my_theme"
        theme.mkdir()
        (theme / "README.md.j2").write_text("# {{ name }}\n\nMachine name: {{ machine_name }}\n")

        SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

        assert (theme / "README.md").read_text() == "# My Theme\n\nMachine name: my_theme\n"
        assert not (theme / "README.md.j2").exists()

    def test_undefined_template_variable_raises_customize_failed(self, tmp_path):
        theme = tmp_path / "my_theme"
        theme.mkdir()
        (theme / "broken.yml.j2").write_text("{{ unknown_variable }}")

        with pytest.raises(CustomizeFailed):
            SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")

    def test_template_that_is_not_utf8_raises_customize_failed(self, tmp_path):
        theme = tmp_path / "my_theme"
        theme.mkdir()
        (theme / "notes.md.j2").write_bytes(b"\xff\xfe {{ name }}")

        with pytest.raises(CustomizeFailed):
            SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")


@pytest.mark.unit
class TestFailures:

    def test_missing_directory_is_a_no_op(self, tmp_path):
        SubThemeGenerator().generate(str(tmp_path / "absent"), "my_theme", "My Theme")

    def test_rename_collision_raises_customize_failed(self, tmp_path):
        theme = tmp_path / "my_theme"
        (theme / "whisk").mkdir(parents=True)
        (theme / "whisk" / "a.txt").write_text("a")
        (theme / "my_theme").mkdir()
        (theme / "my_theme" / "b.txt").write_text("b")

        with pytest.raises(CustomizeFailed):
            SubThemeGenerator().generate(str(theme), "my_theme", "My Theme")
