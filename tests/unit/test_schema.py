from unittest.mock import MagicMock, patch

from app.config.settings import Settings
from app.database.schema import apply_schema, schema_sql


class TestSchemaSql:
    def test_uses_configured_table_names(self) -> None:
        settings = Settings(documents_table="docs_x", app_state_table="state_x")

        rendered = repr(schema_sql(settings))

        assert "Identifier('docs_x')" in rendered
        assert "Identifier('state_x')" in rendered
        assert "Identifier('docs_x_product_type_idx')" in rendered

    def test_empty_array_defaults_are_unescaped(self) -> None:
        rendered = repr(schema_sql(Settings()))

        assert "DEFAULT '{}'" in rendered


class TestApplySchema:
    @patch("app.database.schema.get_connection")
    def test_executes_and_commits(self, mock_get_conn: MagicMock) -> None:
        mock_conn = MagicMock()
        mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
        mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)

        apply_schema(Settings())

        mock_conn.execute.assert_called_once()
        mock_conn.commit.assert_called_once()
