# どこで: `src/shapegen/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 出力先や SVG 書式、平坦化の分割数を利用者側で変えられるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """shapegen の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    svg_decimals: int
    svg_stroke_width: float
    arc_segments: int


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    いずれの場合もキャッシュは破棄される。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".shapegen" / "config.yaml",
        home / ".config" / "shapegen" / "config.yaml",
    )


def _expand_path_text(text: str) -> str:
    return os.path.expandvars(os.path.expanduser(str(text)))


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(_expand_path_text(s))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int(value: Any, *, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc


def _as_float(value: Any, *, key: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """mapping 同士は再帰的にマージし、それ以外は override で置き換える。"""
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("shapegen")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="shapegen/resource/default_config.yaml")


def _required(value: Any, *, key: str) -> Any:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.shapegen/config.yaml` / `~/.config/shapegen/config.yaml`（先に見つかった方）
    3) `set_config_path()` で指定した config
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _deep_merge(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _deep_merge(payload, _load_yaml_config(explicit_path))

    version = _as_int(_required(payload.get("version"), key="version"), key="version")
    if version != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _required(_as_optional_path(paths.get("output_dir")), key="paths.output_dir")

    export = _as_mapping(payload.get("export"), key="export")
    svg = _as_mapping(export.get("svg"), key="export.svg")
    svg_decimals = _required(
        _as_int(svg.get("decimals"), key="export.svg.decimals"), key="export.svg.decimals"
    )
    if svg_decimals < 0:
        raise ValueError(f"export.svg.decimals は 0 以上である必要があります: got={svg_decimals}")
    svg_stroke_width = _required(
        _as_float(svg.get("stroke_width"), key="export.svg.stroke_width"),
        key="export.svg.stroke_width",
    )
    if svg_stroke_width <= 0:
        raise ValueError(
            f"export.svg.stroke_width は正の値である必要があります: got={svg_stroke_width}"
        )

    flatten = _as_mapping(payload.get("flatten"), key="flatten")
    arc_segments = _required(
        _as_int(flatten.get("arc_segments"), key="flatten.arc_segments"),
        key="flatten.arc_segments",
    )
    if arc_segments < 1:
        raise ValueError(f"flatten.arc_segments は 1 以上である必要があります: got={arc_segments}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        output_dir=output_dir,
        svg_decimals=int(svg_decimals),
        svg_stroke_width=float(svg_stroke_width),
        arc_segments=int(arc_segments),
    )
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。"""

    return Path(runtime_config().output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
