"""TemplateApp: Qt screens with a broadcast light/dark theme toggle."""
