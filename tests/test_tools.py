"""
Tests for MCP tools.

Tests the MCP tool implementations for key navigation, notation
and MIDI compilation.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_scales.layouts import LayoutLoader
from chuk_mcp_scales.tools import register_navigation_tools, register_notation_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def navigation_tools():
    return register_navigation_tools(MockMCPServer("test"))


@pytest.fixture
def notation_tools(temp_dir: Path, layout_loader: LayoutLoader):
    return register_notation_tools(MockMCPServer("test"), layout_loader, temp_dir / "output")


class TestRegistration:
    """Tools register under their public names."""

    def test_tool_names(self, navigation_tools, notation_tools):
        """All tools are registered with the server."""
        mcp = MockMCPServer("test")
        register_navigation_tools(mcp)
        register_notation_tools(mcp, LayoutLoader(), Path("output"))
        assert set(mcp.tools) == {
            "scales_next_fifth",
            "scales_prev_fifth",
            "scales_relative_key",
            "scales_list_roots",
            "scales_list_scale_types",
            "scales_random_root",
            "scales_generate_notation",
            "scales_compile_midi",
            "scales_list_layouts",
        }
        assert set(navigation_tools) | set(notation_tools) == set(mcp.tools)


class TestNavigationTools:
    """Tests for key navigation tools."""

    @pytest.mark.asyncio
    async def test_next_fifth(self, navigation_tools):
        """Step clockwise from G."""
        data = json.loads(await navigation_tools["scales_next_fifth"](root="G"))
        assert data["status"] == "success"
        assert data["root"]["name"] == "D"
        assert data["root"]["pitch_class"] == 2

    @pytest.mark.asyncio
    async def test_next_fifth_minor(self, navigation_tools):
        """Minor keys use minor spellings."""
        result = await navigation_tools["scales_next_fifth"](
            root="C#", scale_type="Minor (Harmonic)"
        )
        data = json.loads(result)
        assert data["root"]["name"] == "G#"

    @pytest.mark.asyncio
    async def test_prev_fifth(self, navigation_tools):
        """Step counter-clockwise from C."""
        data = json.loads(await navigation_tools["scales_prev_fifth"](root="C"))
        assert data["status"] == "success"
        assert data["root"]["name"] == "F"
        assert data["root"]["accidental"] == ""

    @pytest.mark.asyncio
    async def test_invalid_root(self, navigation_tools):
        """Unparseable roots return an error."""
        data = json.loads(await navigation_tools["scales_next_fifth"](root="H"))
        assert data["status"] == "error"
        assert "Invalid root" in data["message"]

    @pytest.mark.asyncio
    async def test_invalid_scale_type(self, navigation_tools):
        """Unknown scale types list the valid ones."""
        data = json.loads(
            await navigation_tools["scales_prev_fifth"](root="C", scale_type="Dorian")
        )
        assert data["status"] == "error"
        assert "Minor (Harmonic)" in data["message"]

    @pytest.mark.asyncio
    async def test_relative_key(self, navigation_tools):
        """Major goes to harmonic minor and back."""
        data = json.loads(await navigation_tools["scales_relative_key"](root="Eb"))
        assert data["root"]["name"] == "C"
        assert data["scale_type"] == "Minor (Harmonic)"

        data = json.loads(
            await navigation_tools["scales_relative_key"](root="C", scale_type=data["scale_type"])
        )
        assert data["root"]["name"] == "Eb"
        assert data["scale_type"] == "Major"

    @pytest.mark.asyncio
    async def test_relative_key_aliases(self, navigation_tools):
        """Scale type aliases are accepted."""
        data = json.loads(
            await navigation_tools["scales_relative_key"](root="G#", scale_type="natural_minor")
        )
        assert data["status"] == "success"
        assert data["root"]["name"] == "B"

    @pytest.mark.asyncio
    async def test_list_roots(self, navigation_tools):
        """Twelve roots in chromatic order."""
        data = json.loads(await navigation_tools["scales_list_roots"]())
        assert data["count"] == 12
        assert [r["pitch_class"] for r in data["roots"]] == list(range(12))

    @pytest.mark.asyncio
    async def test_list_scale_types(self, navigation_tools):
        """All four scale types are listed."""
        data = json.loads(await navigation_tools["scales_list_scale_types"]())
        assert data["scale_types"] == [
            "Major",
            "Minor (Natural)",
            "Minor (Harmonic)",
            "Minor (Melodic)",
        ]

    @pytest.mark.asyncio
    async def test_random_root(self, navigation_tools):
        """A random root differs from the current one and resets to Major."""
        for _ in range(20):
            data = json.loads(await navigation_tools["scales_random_root"](current="C"))
            assert data["status"] == "success"
            assert data["root"]["pitch_class"] != 0
            assert data["scale_type"] == "Major"

    @pytest.mark.asyncio
    async def test_random_root_invalid_current(self, navigation_tools):
        """An invalid current root is reported."""
        data = json.loads(await navigation_tools["scales_random_root"](current="Q"))
        assert data["status"] == "error"


class TestNotationTools:
    """Tests for notation and MIDI tools."""

    @pytest.mark.asyncio
    async def test_generate_notation(self, notation_tools):
        """Generates the ABC drill."""
        data = json.loads(await notation_tools["scales_generate_notation"](root="C"))
        assert data["status"] == "success"
        assert data["key"] == "C"
        assert data["layout"] == "standard"
        assert data["abc"].startswith("M: 2/4\nL: 1/16\nK: C\nV: 1 treble\n")
        assert data["abc"].endswith("|]\n")

    @pytest.mark.asyncio
    async def test_generate_minor(self, notation_tools):
        """Minor drills declare a minor key."""
        result = await notation_tools["scales_generate_notation"](
            root="A", scale_type="Minor (Melodic)"
        )
        data = json.loads(result)
        assert data["key"] == "Am"
        assert "e^f^ga" in data["abc"]

    @pytest.mark.asyncio
    async def test_generate_with_layout(self, notation_tools):
        """Library layouts change the header."""
        result = await notation_tools["scales_generate_notation"](root="D", layout="relaxed")
        data = json.loads(result)
        assert data["layout"] == "relaxed"
        assert "M: 4/4\nL: 1/8\n" in data["abc"]

    @pytest.mark.asyncio
    async def test_generate_missing_layout(self, notation_tools):
        """Unknown layouts return an error."""
        result = await notation_tools["scales_generate_notation"](root="D", layout="nope")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_generate_invalid_root(self, notation_tools):
        """Invalid roots return an error."""
        data = json.loads(await notation_tools["scales_generate_notation"](root="Z#"))
        assert data["status"] == "error"
        assert "Invalid root" in data["message"]

    @pytest.mark.asyncio
    async def test_compile_midi(self, notation_tools, temp_dir: Path):
        """Compiles a MIDI file into the output directory."""
        result = await notation_tools["scales_compile_midi"](
            root="F#", scale_type="Minor (Harmonic)"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        path = Path(data["path"])
        assert path.exists()
        assert path.parent == temp_dir / "output"
        assert path.name == "Fsharpm_harmonic_minor.mid"
        assert data["tempo_bpm"] == 100

    @pytest.mark.asyncio
    async def test_compile_midi_custom(self, notation_tools, temp_dir: Path):
        """Output name and tempo can be chosen."""
        result = await notation_tools["scales_compile_midi"](
            root="Bb", output_name="warmup", tempo_bpm=60
        )
        data = json.loads(result)
        assert data["path"] == str(temp_dir / "output" / "warmup.mid")
        assert data["tempo_bpm"] == 60

    @pytest.mark.asyncio
    async def test_compile_midi_invalid(self, notation_tools):
        """Invalid scale types return an error."""
        data = json.loads(
            await notation_tools["scales_compile_midi"](root="C", scale_type="Lydian")
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_list_layouts(self, notation_tools, temp_dir: Path):
        """Lists library layouts plus project layouts."""
        project = temp_dir / "layouts"
        project.mkdir()
        (project / "waltz.yaml").write_text("meter: '3/4'\n")

        data = json.loads(await notation_tools["scales_list_layouts"]())
        assert data["status"] == "success"
        names = {layout["name"] for layout in data["layouts"]}
        assert names == {"standard", "relaxed", "waltz"}
        assert data["count"] == 3
