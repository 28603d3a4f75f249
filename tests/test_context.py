from __future__ import annotations

from pathlib import Path

import click
import pytest

from verbump.config import VerbumpConfig
from verbump.context import VerbumpContext, pass_context


@pytest.mark.unit
class TestVerbumpContext:
    """Tests for VerbumpContext class."""

    def test_default_initialization(self) -> None:
        """Test VerbumpContext initializes with correct default values."""
        ctx = VerbumpContext()

        assert ctx.config_path is None
        assert ctx.verbose == 0
        assert ctx.color is True
        assert ctx.config == VerbumpConfig()

    def test_instances_are_independent(self) -> None:
        """Test multiple VerbumpContext instances do not share state."""
        ctx1 = VerbumpContext()
        ctx2 = VerbumpContext()

        ctx1.verbose = 2
        ctx1.config.language = "rust"

        assert ctx2.verbose == 0
        assert ctx2.config.language is None

    def test_attributes_can_be_set(self) -> None:
        """Test all context attributes can be set and retrieved."""
        ctx = VerbumpContext()
        config = VerbumpConfig(language="rust")

        ctx.config_path = Path("/path/to/verbump.toml")
        ctx.config = config
        ctx.color = False

        assert ctx.config_path == Path("/path/to/verbump.toml")
        assert ctx.config is config
        assert ctx.color is False

    def test_slots_prevents_arbitrary_attributes(self) -> None:
        """Test __slots__ prevents setting undefined attributes."""
        ctx = VerbumpContext()

        with pytest.raises(AttributeError):
            ctx.undefined_attribute = "value"  # type: ignore[attr-defined]


@pytest.mark.unit
class TestPassContext:
    """Tests for the pass_context decorator."""

    def test_creates_context_when_missing(self) -> None:
        """Test a default context is created when none was set up."""
        seen = []

        @click.command()
        @pass_context
        def command(ctx: VerbumpContext) -> None:
            seen.append(ctx)

        command.main([], standalone_mode=False)

        assert len(seen) == 1
        assert isinstance(seen[0], VerbumpContext)

    def test_uses_existing_context(self) -> None:
        """Test the object stored on the Click context is passed through."""
        existing = VerbumpContext()
        existing.verbose = 3
        seen = []

        @click.command()
        @pass_context
        def command(ctx: VerbumpContext) -> None:
            seen.append(ctx)

        command.main([], standalone_mode=False, obj=existing)

        assert seen == [existing]
