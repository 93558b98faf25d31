# lmmcurve/io/config.py
from __future__ import annotations
import pathlib
import yaml

from ..core.curve import Curve
from ..rates.lmm import LMM2F
from ..sim.rng import RNG

_DTYPES = {"float64", "float32"}


def load_settings(path: str | pathlib.Path) -> dict:
    """
    Lit le fichier YAML de la simulation (seed, alpha, courbe initiale) et renvoie un dict.
    FileNotFoundError si le fichier manque, ValueError si une clé manque.
    """
    p = pathlib.Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Settings must be a mapping, got {type(cfg).__name__}")
    # validations minimales
    required = ["seed", "alpha", "curve"]
    for k in required:
        if k not in cfg:
            raise ValueError(f"Missing required key in settings: '{k}'")
    curve = cfg["curve"]
    if not isinstance(curve, dict):
        raise ValueError(f"Settings 'curve' must be a mapping, got {type(curve).__name__}")
    for k in ("t", "f", "sigma"):
        if k not in curve:
            raise ValueError(f"Missing required key in settings: 'curve.{k}'")
    dtype = cfg.setdefault("dtype", "float64")
    if dtype not in _DTYPES:
        raise ValueError(f"dtype must be one of {sorted(_DTYPES)}, got '{dtype}'")
    return cfg


def build_from_settings(cfg: dict) -> tuple[Curve, LMM2F]:
    """Forward-quoted initial curve and a seeded model."""
    c = cfg["curve"]
    curve = Curve.from_arrays(c["t"], c["f"], c["sigma"], dtype=cfg.get("dtype", "float64"))
    model = LMM2F(alpha=cfg["alpha"], rng=RNG(seed=cfg["seed"]).gen)
    return curve, model
