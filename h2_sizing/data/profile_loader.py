"""
Hourly profile loading and CSV round-tripping.

CSV dialect:
    - No header row.
    - Either one value per line (``\\n`` or ``\\r\\n``) or a single line of
      comma-separated values.
    - Tokens are whitespace-trimmed and converted with ``pd.to_numeric``;
      tokens that are not finite, non-negative numbers are skipped.
    - Output is always one value per line with no trailing newline.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from h2_sizing.core.constants import DEFAULT_PROFILE_FILENAME, HOURS_PER_YEAR, TEMPLATE_FILENAME
from h2_sizing.core.exceptions import DataUnavailable, ExportError, InvalidProfile
from h2_sizing.data.profile import HourlyProfile

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r'\r?\n')


@dataclass(frozen=True)
class SkippedToken:
    """A CSV token dropped during parsing."""
    position: int    # 0-based index among all tokens
    token: str
    reason: str


@dataclass
class ProfileParseReport:
    """
    Parsed profile plus the tokens that were dropped on the way.

    Attributes:
        profile (HourlyProfile): Values that survived filtering.
        skipped (List[SkippedToken]): Diagnostics for every dropped token.
    """
    profile: HourlyProfile
    skipped: List[SkippedToken] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.skipped


def _split_tokens(text: str) -> List[str]:
    lines = _LINE_BREAK.split(text.lstrip('\ufeff').strip())
    if len(lines) == 1 and ',' in lines[0]:
        return [token.strip() for token in lines[0].split(',')]
    return [line.strip() for line in lines]


def _format_value(value: float) -> str:
    """Shortest text that parses back to exactly ``value``."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class ProfileLoader:
    """
    Loads hourly generation profiles from the bundled dataset or CSV text.

    Example:
        >>> loader = ProfileLoader()
        >>> profile = loader.load_default()
        >>> custom = loader.parse("0\\n120.5\\n350")
        >>> loader.serialize(custom)
        '0\\n120.5\\n350'
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Args:
            data_dir (Path, optional): Directory holding the reference profile.
                Default: the package data directory.
        """
        self.data_dir = Path(data_dir) if data_dir is not None else Path(__file__).parent

    @property
    def default_path(self) -> Path:
        return self.data_dir / DEFAULT_PROFILE_FILENAME

    def load_default(self) -> HourlyProfile:
        """
        Load the bundled reference profile.

        Returns:
            HourlyProfile: The reference 8760-hour profile.

        Raises:
            DataUnavailable: If the asset is missing, unreadable or empty.
        """
        try:
            text = self.default_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Reference profile unavailable at {self.default_path}: {e}")
            raise DataUnavailable(f"Reference profile unavailable: {self.default_path}") from e

        try:
            profile = self.parse(text)
        except InvalidProfile as e:
            raise DataUnavailable(f"Reference profile holds no values: {self.default_path}") from e

        logger.info(f"Loaded reference profile ({len(profile)} hours) from {self.default_path}")
        return profile

    def parse(self, text: str) -> HourlyProfile:
        """
        Parse CSV text into a profile, silently dropping malformed tokens.

        A warning is logged when tokens are dropped; use
        ``parse_with_diagnostics`` to inspect them.

        Raises:
            InvalidProfile: If no numeric value remains after filtering.
        """
        report = self.parse_with_diagnostics(text)
        if report.skipped:
            logger.warning(
                f"Skipped {len(report.skipped)} malformed profile token(s); "
                f"first at position {report.skipped[0].position}: {report.skipped[0].token!r}"
            )
        return report.profile

    def parse_with_diagnostics(self, text: str) -> ProfileParseReport:
        """
        Parse CSV text and report every dropped token.

        Returns:
            ProfileParseReport: Parsed profile and skipped-token diagnostics.

        Raises:
            InvalidProfile: If no numeric value remains after filtering.
        """
        if not isinstance(text, str):
            raise InvalidProfile(f"Profile text must be str, got {type(text).__name__}")

        tokens = pd.Series(_split_tokens(text), dtype=object)
        numbers = pd.to_numeric(tokens, errors='coerce').astype(np.float64).to_numpy()

        unparsed = np.isnan(numbers)
        finite = np.isfinite(numbers)
        keep = finite & (numbers >= 0.0)
        reasons = np.select(
            [tokens.eq('').to_numpy(), unparsed, ~finite, ~keep],
            ["empty token", "not a decimal number", "not finite", "negative generation"],
            default="",
        )
        skipped = [
            SkippedToken(int(position), tokens.iloc[position], str(reasons[position]))
            for position in np.flatnonzero(~keep)
        ]

        values = numbers[keep]
        if not values.size:
            raise InvalidProfile("Profile contains no numeric values")

        if values.size != HOURS_PER_YEAR:
            logger.warning(f"Profile has {values.size} hours; canonical horizon is {HOURS_PER_YEAR}")

        return ProfileParseReport(profile=HourlyProfile(values), skipped=skipped)

    def serialize(self, profile: HourlyProfile) -> str:
        """Render a profile as one value per line, without a trailing newline."""
        return "\n".join(_format_value(value) for value in profile)

    def load_file(self, path: Path | str) -> HourlyProfile:
        """
        Load an uploaded CSV profile file.

        Raises:
            InvalidProfile: If the file cannot be read or holds no values.
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8-sig') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidProfile(f"Cannot read profile file {path}: {e}") from e

        profile = self.parse(text)
        logger.info(f"Loaded profile ({len(profile)} hours) from {path}")
        return profile

    def save_template(self, profile: HourlyProfile, path: Path | str = TEMPLATE_FILENAME) -> Path:
        """
        Write a profile as an editable CSV template.

        Returns:
            Path: The written file.

        Raises:
            ExportError: If the file cannot be written.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(self.serialize(profile))
        except OSError as e:
            raise ExportError(f"Cannot write profile template {path}: {e}") from e
        logger.info(f"Profile template written to {path}")
        return path

    def resolve(self, text: Optional[str] = None) -> HourlyProfile:
        """
        Profile for a run: the uploaded text if given, else the reference profile.

        Blank text counts as "no upload". Non-blank text that yields no values
        raises InvalidProfile rather than falling back.
        """
        if text is None or not text.strip():
            return self.load_default()
        return self.parse(text)


_default_loader = ProfileLoader()


def load_default() -> HourlyProfile:
    """Load the bundled reference profile."""
    return _default_loader.load_default()


def parse(text: str) -> HourlyProfile:
    """Parse CSV text into an HourlyProfile."""
    return _default_loader.parse(text)


def serialize(profile: HourlyProfile) -> str:
    """Serialize a profile to one-value-per-line CSV text."""
    return _default_loader.serialize(profile)
