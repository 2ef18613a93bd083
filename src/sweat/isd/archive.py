"""Client for the NOAA Integrated Surface Database (ISD) file archive."""

from __future__ import annotations

import gzip
import logging
import re
import zlib
from typing import Any, Final

import requests

from sweat.settings import UserSettings
from sweat.utils.file import ensure_directory_exists

from .errors import ArchiveError, DecodeError, NetworkError, StationNotFoundError

logger: Final = logging.getLogger(__name__)

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    403: "Access to the archive was refused",
    404: "No such file in the archive",
    429: "Rate limit exceeded",
    500: "Archive internal error",
    502: "Bad gateway at the archive",
    503: "Archive unavailable (maintenance)",
    504: "Gateway timeout",
}

# Station files are named USAF-WBAN-YEAR.gz
STATION_FILE_TEMPLATE: Final = r"\b([0-9A-Z]{{6}}-{wban}-{year}\.gz)\b"

DOWNLOAD_CHUNK_SIZE: Final = 64 * 1024


class ISDArchive:
    """Locates, downloads, and decodes one station-year of ISD records.

    Files are looked up in the archive's per-year directory listing,
    downloaded as gzip, and decoded to text. Decoded files can be kept in
    ``settings.data_dir`` and are reused on the next run.
    """

    def __init__(self, settings: UserSettings) -> None:
        """Initialize the archive client.

        Args:
            settings: Archive URL, timeout, size limit and cache settings
        """
        self.settings = settings

    def _get(self, url: str, **kwargs: Any) -> requests.Response:
        try:
            resp = requests.get(url, timeout=self.settings.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("Archive network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            msg = HTTP_ERROR_MAP.get(resp.status_code, f"HTTP {resp.status_code}")
            logger.error("Archive error: %s - %s (%s)", resp.status_code, msg, url)
            raise ArchiveError.from_status(resp.status_code, msg, url)
        return resp

    def year_url(self, year: int) -> str:
        return f"{self.settings.archive_url}/{year}/"

    def find_station_file(self, year: int, wban: str) -> str:
        """Find the archive file name holding ``wban``'s records for ``year``.

        Returns:
            File name such as ``722540-13904-2022.gz``

        Raises:
            StationNotFoundError: When the listing has no file for the station
            NetworkError: When the archive cannot be reached
            ArchiveError: For other HTTP errors
        """
        url = self.year_url(year)
        listing = self._get(url).text
        match = re.search(STATION_FILE_TEMPLATE.format(wban=re.escape(wban), year=year), listing)
        if match is None:
            raise StationNotFoundError(f"No file for WBAN {wban} in {year}", url=url)
        logger.debug("WBAN %s -> %s", wban, match.group(1))
        return match.group(1)

    def download(self, year: int, wban: str) -> bytes:
        """Download the gzip-compressed station file.

        The body is streamed and reading stops once it grows past
        ``max_download_bytes``, whether or not ``Content-Length`` was sent.

        Raises:
            ArchiveError: If the payload exceeds ``max_download_bytes``
        """
        url = self.year_url(year) + self.find_station_file(year, wban)
        logger.info("Downloading %s", url)
        resp = self._get(url, stream=True)

        limit = self.settings.max_download_bytes
        too_large = f"File larger than {limit} bytes"
        payload = bytearray()
        try:
            declared = resp.headers.get("Content-Length")
            if declared is not None and declared.isdigit() and int(declared) > limit:
                raise ArchiveError(resp.status_code, too_large, url)
            for chunk in resp.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                payload.extend(chunk)
                if len(payload) > limit:
                    raise ArchiveError(resp.status_code, too_large, url)
        except requests.RequestException as exc:
            raise NetworkError(f"Network error: {exc}", exc) from exc
        finally:
            resp.close()
        return bytes(payload)

    @staticmethod
    def decompress(payload: bytes) -> str:
        """Decode a gzip payload to text.

        Raises:
            DecodeError: If the payload is not valid gzip or not ASCII/UTF-8 text
        """
        try:
            return gzip.decompress(payload).decode("utf-8")
        except (OSError, EOFError, zlib.error, UnicodeDecodeError) as exc:
            raise DecodeError(f"Could not decode station file: {exc}", exc) from exc

    def fetch_lines(self, year: int, wban: str, use_cache: bool = True) -> list[str]:
        """Return the decoded record lines of one station-year.

        A previously saved file is read instead of downloading when
        ``use_cache`` is set. The returned list never contains the empty
        string left after the final newline.

        Raises:
            DecodeError: If the cached file is not UTF-8 text
        """
        cache = self.settings.cache_path(wban, year)
        if use_cache and cache.is_file():
            logger.info("Using cached %s", cache)
            try:
                return cache.read_text(encoding="utf-8").splitlines()
            except UnicodeDecodeError as exc:
                raise DecodeError(f"Cached file {cache} is not text: {exc}", exc) from exc

        text = self.decompress(self.download(year, wban))
        if self.settings.save_raw:
            ensure_directory_exists(cache.parent)
            cache.write_text(text, encoding="utf-8")
            logger.debug("Saved decoded file to %s", cache)
        return text.splitlines()
