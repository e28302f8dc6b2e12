"""
Koji Client Module - Tag queries over XML-RPC and source package downloads
"""

import time
import logging
import xmlrpc.client
from pathlib import Path
from typing import Dict, List

import requests

from spec_sync import config
from spec_sync.exceptions import RemoteQueryError

logger = logging.getLogger(__name__)


class KojiClient:
    """Koji hub client for tag listings and source package retrieval"""

    def __init__(self, hub_url: str, topurl: str, timeout: int = config.HTTP_TIMEOUT,
                 fetch_retries: int = config.FETCH_RETRIES,
                 retry_delay: float = config.RETRY_DELAY, session=None):
        self.hub_url = hub_url
        self.topurl = topurl.rstrip('/') if topurl else topurl
        self.timeout = timeout
        self.fetch_retries = max(1, fetch_retries)
        self.retry_delay = retry_delay
        self.session = session or requests.Session()

    def _call(self, method: str, *args, **kwargs):
        """
        Invoke a hub method.

        Koji expects keyword arguments as a trailing struct flagged with
        __starstar.

        Raises:
            RemoteQueryError: on transport errors, HTTP errors or XML-RPC faults
        """
        params = args
        if kwargs:
            opts = dict(kwargs)
            opts['__starstar'] = True
            params = args + (opts,)

        payload = xmlrpc.client.dumps(params, method, allow_none=True)
        try:
            response = self.session.post(
                self.hub_url,
                data=payload.encode('utf-8'),
                headers={'Content-Type': 'text/xml'},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise RemoteQueryError(f"{method} request to {self.hub_url} failed: {e}") from e

        try:
            result, _ = xmlrpc.client.loads(response.content)
        except xmlrpc.client.Fault as e:
            raise RemoteQueryError(f"{method} fault {e.faultCode}: {e.faultString}") from e
        except Exception as e:
            raise RemoteQueryError(f"{method} returned an unreadable response: {e}") from e

        return result[0] if result else None

    def list_tagged_builds(self, tag: str) -> List[Dict]:
        """
        Latest source RPMs in a tag.

        Args:
            tag: Koji tag name

        Returns:
            List of dicts with name, version, release and (optionally) nvr
        """
        logger.info(f"📡 Querying tag {tag}")
        result = self._call('listTaggedRPMS', tag, latest=True, arch='src')

        if not isinstance(result, (list, tuple)) or not result:
            raise RemoteQueryError(f"Unexpected listTaggedRPMS response for tag {tag}")

        rpms = result[0] or []
        entries = []
        for rpm in rpms:
            entry = {
                'name': rpm['name'],
                'version': rpm['version'],
                'release': rpm['release'],
            }
            if rpm.get('nvr'):
                entry['nvr'] = rpm['nvr']
            entries.append(entry)

        logger.info(f"TAG_QUERY tag={tag} builds={len(entries)}")
        return entries

    def archive_path(self, name: str, version: str, release: str) -> str:
        """Path of a source package below topurl"""
        nvr = f"{name}-{version}-{release}"
        return f"packages/{name}/{version}/{release}/src/{nvr}.src.rpm"

    def fetch_archive(self, name: str, version: str, release: str, dest_dir) -> Path:
        """
        Download a source package into dest_dir.

        Transient failures (connection errors, timeouts, 5xx responses) are
        retried with exponential backoff.

        Args:
            name: Package name
            version: Build version
            release: Build release as stored by the hub (not dist-erased)
            dest_dir: Directory that receives the archive

        Returns:
            Path of the downloaded archive

        Raises:
            RemoteQueryError: on 4xx responses or when retries are exhausted
        """
        url = f"{self.topurl}/{self.archive_path(name, version, release)}"
        target = Path(dest_dir) / url.rsplit('/', 1)[-1]

        delay = self.retry_delay
        last_error = None
        for attempt in range(self.fetch_retries):
            if attempt > 0:
                logger.info(f"FETCH_RETRY attempt={attempt} max={self.fetch_retries} delay={delay:.1f}s")
                time.sleep(delay)
                delay *= 2

            logger.info(f"📥 Fetching {url}")
            try:
                with self.session.get(url, stream=True, timeout=self.timeout) as response:
                    if 400 <= response.status_code < 500:
                        raise RemoteQueryError(f"Fetching {url} failed: HTTP {response.status_code}")
                    response.raise_for_status()
                    with open(target, 'wb') as f:
                        for chunk in response.iter_content(chunk_size=65536):
                            if chunk:
                                f.write(chunk)
                return target
            except requests.exceptions.RequestException as e:
                logger.warning(f"FETCH_RETRY_REASON attempt={attempt} reason={e}")
                last_error = e

        raise RemoteQueryError(f"Fetching {url} failed after {self.fetch_retries} attempts: {last_error}")
