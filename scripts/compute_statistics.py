"""
방문 통계 계산 스크립트
----------------------
restaurants.jsonl 스냅샷을 읽어서 기간별 통계를 출력합니다.
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys
from pathlib import Path

# 환경 변수 로드
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# footprints 모듈 import를 위해 경로 추가
sys.path.insert(0, str(PROJECT_ROOT))

from footprints.core.config import settings  # noqa: E402
from footprints.core.logging import configure_logging  # noqa: E402
from footprints.schemas.statistics import StatisticsReport  # noqa: E402
from footprints.schemas.time_range import TimeRange  # noqa: E402
from footprints.services.snapshot_store import load_snapshot  # noqa: E402
from footprints.services.statistics import compute_statistics  # noqa: E402


def print_report(report: StatisticsReport) -> None:
    overview = report.overview
    print("\n" + "=" * 60)
    print(f"{report.time_range.label} (as of {report.today.isoformat()})")
    print("=" * 60)
    print(f"  Restaurants: {overview.total_restaurants}")
    print(f"  Visits: {overview.total_visits}")
    if overview.average_rating is not None:
        print(f"  Average rating: {overview.average_rating:.1f}")
    if overview.most_visited is not None:
        print(f"  Most visited: {overview.most_visited.restaurant_name} ({overview.most_visited.metric} visits)")
        if overview.most_visited.restaurant_address:
            address = overview.most_visited.restaurant_address.replace("\n", ", ")
            print(f"    {address}")

    print("\nMost visited restaurants")
    for entry in report.top_visited:
        print(f"  {entry.restaurant_name}: {entry.metric} visits")

    print("\nHighest rated restaurants")
    for entry in report.top_rated:
        print(f"  {entry.restaurant_name}: {entry.metric:.1f} ★")

    print("\nMost visited cities")
    for stat in report.top_cities:
        print(f"  {stat.city}: {stat.count} visits")

    print("\nRatings distribution")
    for histogram_bin in reversed(report.rating_distribution):
        print(f"  {histogram_bin.rating} ★ {'#' * histogram_bin.count} {histogram_bin.count}")

    print(f"\nVisits per {report.interval.value}")
    for point in report.visit_series:
        print(f"  {point.period_start.isoformat()}: {point.count}")

    print(f"\nPhotos: {report.total_photos}")
    if report.most_photographed is not None:
        print(f"  Most photos: {report.most_photographed.restaurant_name} ({report.most_photographed.metric})")
    print("=" * 60)


def main() -> None:
    parser = argparse.ArgumentParser(description="restaurants.jsonl → 방문 통계")
    parser.add_argument(
        "--file",
        type=Path,
        default=Path(settings.snapshot_path),
        help="스냅샷 JSONL 파일 경로 (기본: SNAPSHOT_PATH 또는 ./restaurants.jsonl)",
    )
    parser.add_argument(
        "--range",
        dest="time_range",
        type=TimeRange,
        choices=list(TimeRange),
        default=TimeRange.ALL_TIME,
        help="기간 (기본: all_time)",
    )
    parser.add_argument(
        "--today",
        type=dt.date.fromisoformat,
        default=None,
        help="기준일 YYYY-MM-DD (기본: 오늘)",
    )
    parser.add_argument("--limit", type=int, default=None, help="순위 목록 개수")
    parser.add_argument("--json", action="store_true", help="JSON으로 출력")
    args = parser.parse_args()

    configure_logging(settings.log_level)

    if not args.file.exists():
        raise SystemExit(f"파일을 찾을 수 없습니다: {args.file}")

    snapshot, summary = load_snapshot(args.file)
    report = compute_statistics(snapshot, args.time_range, args.today or dt.date.today(), args.limit)

    if args.json:
        print(report.model_dump_json(indent=2))
        return

    print(f"📖 {args.file}: 식당 {summary.loaded}개 로드, {summary.skipped}개 건너뜀")
    print_report(report)


if __name__ == "__main__":
    main()
