#!/usr/bin/env python3
"""
Demo 1: Zoom search for the best split of a sum
===============================================

Problem:
  a + b = S, a, b >= 0, maximize |a - b| * a * b

The search scans [0, S/2] coarsely, then re-scans a shrinking interval
around the best candidate at a finer step until a round stops improving.

Figure:
  left  - objective over [0, S] with the scanned interval of every round
  right - best score per round against the reference maximum
"""

import argparse
import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

from number_pairing import solve, format_result
from number_pairing.reference import objective, bounded_maximum, grid_maximum

COLORS = {
    'objective': '#2c3e50',
    'interval': '#b9e7b9',
    'best': 'red',
    'reference': 'blue',
}


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--sum', type=float, default=8.0)
    parser.add_argument('--out', default='notes/demo_number_pairing.png')
    parser.add_argument('--svg', action='store_true', help='Also save SVG')
    args = parser.parse_args()

    total = args.sum
    result = solve(total, True)
    print(format_result(result))

    ref = bounded_maximum(total)
    grid = grid_maximum(total)
    best = result.best_pairs[0]
    print("Cross-check:")
    print(f"  zoom search : a = {best.first():.8f}, score = {result.best_score:.10f}")
    print(f"  scipy       : a = {ref.first:.8f}, score = {ref.score:.10f}")
    print(f"  grid        : a = {grid.first:.8f}, score = {grid.score:.10f}")
    gap = abs(result.best_score - ref.score)
    print(f"  {'✓' if gap < 1e-6 else '✗'} |search - scipy| = {gap:.2e}")

    a = np.linspace(0.0, total, 801)
    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))

    ax = axes[0]
    ax.plot(a, objective(a, total), color=COLORS['objective'], lw=2, label='|a-b|·a·b')
    for r in result.rounds:
        ax.axvspan(r.low, r.high, alpha=0.15, color=COLORS['interval'])
    ax.axvline(best.first(), color=COLORS['best'], lw=1.5, ls='--', label=f'a = {best.first():.4f}')
    ax.set_xlabel('a', fontsize=11)
    ax.set_ylabel('score', fontsize=11)
    ax.set_title(f'Objective for S = {total:g}', fontsize=11)
    ax.legend(loc='upper right', fontsize=8)
    ax.grid(True, alpha=0.2)

    ax = axes[1]
    idx = [r.index for r in result.rounds]
    gaps = [max(ref.score - r.best.score(), 1e-16) for r in result.rounds]
    ax.semilogy(idx, gaps, 'o-', color=COLORS['best'])
    ax.set_xlabel('Round', fontsize=11)
    ax.set_ylabel('reference - round best', fontsize=11)
    ax.set_title(f'Convergence ({result.round_count} rounds)', fontsize=11)
    ax.grid(True, alpha=0.2)

    plt.tight_layout()
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out, dpi=150, bbox_inches='tight')
    if args.svg:
        plt.savefig(out.with_suffix('.svg'), format='svg', bbox_inches='tight')
    plt.close()
    print(f"\nSaved: {out}")


if __name__ == '__main__':
    main()
