"""End-to-end flows over a real vault directory."""

from pathlib import Path

import pytest

from metascry import Factory, UpdateOptions, group_by, index_by, open_vault
from metascry.core.exceptions import DocumentNotFoundError


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    projects = tmp_path / "Projects"
    projects.mkdir()
    (projects / "Alpha.md").write_text(
        "---\nstatus: active\nowner: ana\n---\n# Goals\n\nShip it.\n\n# Log\n\nStarted.\n",
        encoding="utf-8",
    )
    (projects / "Beta.md").write_text(
        "---\nstatus: paused\nowner: ben\n---\n# Goals\n\nWait.\n", encoding="utf-8"
    )
    (projects / "Alpha.values.md").write_text("---\nscore: 1\n---\n", encoding="utf-8")
    (projects / "_prototype.md").write_text("---\nkind: project\n---\n", encoding="utf-8")
    return tmp_path


PROJECTS = ["Projects/Alpha.md", "Projects/Beta.md"]


class TestReadFlow:
    """Reading and aggregating across documents."""

    def test_group_and_index(self, vault_dir: Path):
        """Map results feed the collection helpers."""
        with open_vault(vault_dir) as session:
            records = session.scrier.get(PROJECTS)

            by_status = group_by(records.values(), "status")
            by_owner = index_by(records.values(), "owner")

        assert {k: len(v) for k, v in by_status.items()} == {"active": 1, "paused": 1}
        assert by_owner["ana"]["file"]["name"] == "Alpha.md"

    @pytest.mark.asyncio
    async def test_lazy_sections(self, vault_dir: Path):
        """Section content is loaded from disk on demand."""
        with open_vault(vault_dir) as session:
            sections = session.scrier.sections("Projects/Alpha")

            assert sections.headings == ["Goals", "Log"]
            assert await sections["Log"].load() == "Started."

    def test_active_document(self, vault_dir: Path):
        """The active document backs the current accessor."""
        with open_vault(vault_dir) as session:
            session.vault.set_active("Projects/Beta")

            assert session.scrier.current.matter == {"status": "paused", "owner": "ben"}
            assert session.scrier.current.path == "Projects/Beta"


class TestWriteFlow:
    """Writing frontmatter back to disk."""

    @pytest.mark.asyncio
    async def test_patch_round_trip(self, vault_dir: Path):
        """A patch is visible to a fresh session."""
        async with open_vault(vault_dir) as session:
            await session.scrier.patch(PROJECTS, Factory(lambda s: f"{s}!"), "status")

        with open_vault(vault_dir) as session:
            assert session.scrier.get(PROJECTS, "status") == {
                "Projects/Alpha.md": "active!",
                "Projects/Beta.md": "paused!",
            }
        body = (vault_dir / "Projects" / "Alpha.md").read_text(encoding="utf-8")
        assert body.endswith("# Goals\n\nShip it.\n\n# Log\n\nStarted.\n")

    @pytest.mark.asyncio
    async def test_values_file_redirect(self, vault_dir: Path):
        """to_values_file writes the companion document only."""
        async with open_vault(vault_dir) as session:
            await session.scrier.patch(
                "Projects/Alpha", Factory(lambda n: n + 1), "score", UpdateOptions(to_values_file=True)
            )

            assert session.scrier.get("Projects/Alpha.values.md", "score") == 2
            assert session.scrier.get("Projects/Alpha", "score") is None

    @pytest.mark.asyncio
    async def test_prototype_redirect(self, vault_dir: Path):
        """prototype writes the folder's shared document."""
        async with open_vault(vault_dir) as session:
            await session.scrier.patch("Projects/Beta", True, "shared", UpdateOptions(prototype=True))

            assert session.scrier.frontmatter("Projects/_prototype") == {"kind": "project", "shared": True}

    @pytest.mark.asyncio
    async def test_missing_values_file(self, vault_dir: Path):
        """Redirecting to a companion that does not exist fails cleanly."""
        async with open_vault(vault_dir) as session:
            with pytest.raises(DocumentNotFoundError):
                await session.scrier.patch("Projects/Beta", 1, "x", UpdateOptions(to_values_file=True))

        assert "x:" not in (vault_dir / "Projects" / "Beta.md").read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_clear_keys(self, vault_dir: Path):
        """clear removes keys on disk."""
        async with open_vault(vault_dir) as session:
            meta = await session.scrier.clear("Projects/Alpha", {"owner": None})

        assert meta.frontmatter == {"status": "active"}
