from __future__ import annotations

from sortcount import Algorithm, build_report_html, compare_algorithms


if __name__ == "__main__":
    results = compare_algorithms(
        algorithms=[Algorithm.INSERTION, Algorithm.MERGE, Algorithm.QUICK, Algorithm.LIBRARY],
        n=103,
        repeats=200,
    )
    for r in results:
        s = r.stats
        print(f"{r.label:>10}\t{s.minimum}\t{s.average}\t{s.maximum}")

    html = build_report_html(
        results,
        title="Insertion vs. Merge vs. Quick vs. Library",
        notes="Comparison counts on random integer sequences.",
    )
    print(f"Rendered report: {len(html)} characters")
