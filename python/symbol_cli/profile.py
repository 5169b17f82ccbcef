"""Wallet profiles: the node, network and key a command signs and announces with.

Profiles are kept in a JSON file (``~/.symbolrc.json`` unless
``SYMBOL_CLI_PROFILES`` points elsewhere). When the requested profile is not
stored, ``NODE_URL`` / ``PRIVATE_KEY`` / ``NETWORK`` from the environment (or
``.env``) are used instead.
"""
import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from symbolchain.CryptoTypes import PrivateKey
from symbolchain.facade.SymbolFacade import SymbolFacade, SymbolAccount

from symbol_cli import config
from symbol_cli.errors import ProfileError

logger = logging.getLogger(__name__)

NETWORKS = ("testnet", "mainnet")


@dataclass
class Profile:
    name: str
    url: str
    network: str
    private_key: str

    @property
    def facade(self) -> SymbolFacade:
        return SymbolFacade(self.network)

    @property
    def account(self) -> SymbolAccount:
        try:
            return self.facade.create_account(PrivateKey(self.private_key))
        except ValueError as e:
            raise ProfileError(f"Profile '{self.name}' has an invalid private key") from e

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def profile_from_dict(entry: Dict[str, Any]) -> Profile:
    try:
        profile = Profile(
            name=entry["name"],
            url=entry["url"].rstrip("/"),
            network=entry.get("network") or config.DEFAULT_NETWORK,
            private_key=entry["private_key"],
        )
    except KeyError as e:
        raise ProfileError(f"Malformed profile entry, missing {e}") from e
    if profile.network not in NETWORKS:
        raise ProfileError(f"Unknown network '{profile.network}' in profile '{profile.name}'")
    return profile


def profile_from_environment(name: str) -> Optional[Profile]:
    if not config.private_key() or not config.node_url():
        return None
    return profile_from_dict({
        "name": name,
        "url": config.node_url(),
        "network": config.network(),
        "private_key": config.private_key(),
    })


class ProfileRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = config.profiles_path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {"profiles": []}
        try:
            data: Dict[str, Any] = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ProfileError(f"Malformed profile store at {self.path}") from e
        if "profiles" not in data:
            raise ProfileError(f"Malformed profile store at {self.path}")
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # 秘密鍵を含むため所有者のみ読み書き可能な一時ファイルに書いてから置き換える
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(json.dumps(data, indent=2))
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise

    def all(self) -> List[Profile]:
        return [profile_from_dict(entry) for entry in self._load()["profiles"]]

    def find(self, name: Optional[str] = None) -> Profile:
        name = name or config.DEFAULT_PROFILE_NAME
        for profile in self.all():
            if profile.name == name:
                return profile

        env_profile: Optional[Profile] = profile_from_environment(name)
        if env_profile is not None:
            logger.debug("profile '%s' not stored, using NODE_URL / PRIVATE_KEY", name)
            return env_profile

        raise ProfileError(
            f"Profile '{name}' not found. Create one with 'symbol-cli profile create' "
            "or set NODE_URL and PRIVATE_KEY"
        )

    def save(self, profile: Profile, force: bool = False) -> None:
        data: Dict[str, Any] = self._load()
        entries: List[Dict[str, Any]] = [e for e in data["profiles"] if e.get("name") != profile.name]
        if len(entries) != len(data["profiles"]) and not force:
            raise ProfileError(f"Profile '{profile.name}' already exists")
        entries.append(profile.to_dict())
        data["profiles"] = entries
        self._save(data)
