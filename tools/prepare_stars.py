#!/usr/bin/env python3
"""
Build the star quiz catalog from the HYG star database.

    python -m tools.prepare_stars --input hyg_v42.csv.gz --output data/stars.json

Keeps stars with mag <= --max-mag and a proper name (the Sun excluded),
and writes {"stars": [...], "namedStars": [...]} as indented JSON.
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import numpy as np
import pandas as pd

logger = logging.getLogger("PrepareStars")

FIELDS = ["id", "proper", "ra", "dec", "dist", "mag", "x", "y", "z"]
NUMERIC_FIELDS = ["ra", "dec", "dist", "mag", "x", "y", "z"]
MAX_MAGNITUDE = 8.0
SUN_NAME = "Sol"


def _read_table(path: Path) -> pd.DataFrame:
    # compression inferred from the suffix (.gz)
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    df.columns = [c.strip().strip('"') for c in df.columns]
    return df


def prepare(df: pd.DataFrame, max_mag: float = MAX_MAGNITUDE,
            include_unnamed: bool = False) -> dict[str, list[dict]]:
    """
    Filter and normalise a HYG table.

    Unparseable numbers become 0. Missing columns are left out of the
    records (the loader fills them with defaults).
    """
    df = df.copy()
    for col in NUMERIC_FIELDS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0.0)
    if "proper" in df.columns:
        df["proper"] = df["proper"].astype(str).str.strip().str.strip('"')
    else:
        df["proper"] = ""

    mag = df["mag"] if "mag" in df.columns else pd.Series(0.0, index=df.index)
    bright = (mag <= max_mag).to_numpy()
    named = ((df["proper"] != "") & (df["proper"] != SUN_NAME)).to_numpy()

    cols = [c for c in FIELDS if c in df.columns]
    if "id" in df.columns:
        df["id"] = pd.to_numeric(df["id"], errors="coerce").fillna(0).astype(np.int64)

    named_df = df.loc[bright & named, cols]
    stars_df = df.loc[bright, cols] if include_unnamed else named_df

    named_stars = named_df.to_dict(orient="records")
    stars = stars_df.to_dict(orient="records") if include_unnamed else named_stars
    return {"stars": stars, "namedStars": named_stars}


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="HYG CSV(.gz) -> star quiz JSON")
    ap.add_argument("--input", required=True, type=Path, help="hyg_v*.csv or .csv.gz")
    ap.add_argument("--output", default=Path("data/stars.json"), type=Path)
    ap.add_argument("--max-mag", default=MAX_MAGNITUDE, type=float,
                    help="Faintest magnitude kept (default: %(default)s)")
    ap.add_argument("--include-unnamed", action="store_true",
                    help="Also put unnamed stars in 'stars' (drawn but never quizzed)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    if not args.input.exists():
        raise SystemExit(f"Input not found: {args.input}")

    logger.info("Reading %s", args.input)
    df = _read_table(args.input)
    logger.info("Found %d stars", len(df))

    data = prepare(df, args.max_mag, args.include_unnamed)

    out = args.output
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    size_mb = out.stat().st_size / 1024 / 1024
    logger.info("Processed %d named stars (mag <= %g)", len(data["namedStars"]), args.max_mag)
    logger.info("Wrote %s  stars=%d  (%.2f MB)", out, len(data["stars"]), size_mb)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
