#!/usr/bin/env python3
"""
Test runner for Balance Sheet Pro.
Runs each pytest suite separately and writes a summary report.
"""

import os
import subprocess
import sys
import time
from datetime import datetime

TEST_SUITES = [
    ('Unit Scale Detection', 'tests/test_unit_scale.py',
     'Units declarations, precedence and prefix bound'),
    ('Field Extraction', 'tests/test_field_extraction.py',
     'Rule priority, field independence and the Total fallback'),
    ('Normalization Functions', 'tests/test_normalization_functions.py',
     'Separator stripping, scaling and decimal formatting'),
    ('Page Scanner', 'tests/test_page_scanner.py',
     'Early stop after section markers and the page cap'),
    ('Extraction Pipeline', 'tests/test_extraction_service.py',
     'End-to-end PDF extraction and failure downgrades'),
    ('Liability Calculator', 'tests/test_liability_calculator.py',
     'Totals and merging extracted figures into the form'),
    ('Export Functionality', 'tests/test_export_functionality.py',
     'Balance sheet PDF, XLSX and JSON generation'),
    ('API', 'tests/test_api.py',
     'Upload, compute and export endpoints'),
]

STATUS_ICONS = {
    'PASSED': '✅',
    'FAILED': '❌',
    'ERROR': '💥',
    'TIMEOUT': '⏰',
    'MISSING': '❓'
}


def run_suite(name, path):
    """Run one pytest file and return its result record."""
    if not os.path.exists(path):
        print(f"❌ Test file not found: {path}")
        return {'name': name, 'status': 'MISSING', 'duration': 0, 'details': f"{path} not found"}

    start_time = time.time()
    try:
        result = subprocess.run(
            [sys.executable, '-m', 'pytest', path, '-v', '--tb=short', '--no-header', '--quiet'],
            capture_output=True, text=True, timeout=300
        )
    except subprocess.TimeoutExpired:
        duration = time.time() - start_time
        print(f"⏰ TIMEOUT - {duration:.2f}s")
        return {'name': name, 'status': 'TIMEOUT', 'duration': duration,
                'details': f"Timed out after {duration:.2f}s"}

    duration = time.time() - start_time
    status = 'PASSED' if result.returncode == 0 else 'FAILED'
    print(f"{STATUS_ICONS[status]} {status} - {duration:.2f}s")
    if status == 'FAILED' and result.stdout:
        print(result.stdout[-800:])

    return {
        'name': name,
        'status': status,
        'duration': duration,
        'details': f"pytest exited with {result.returncode}",
        'stdout': result.stdout,
        'stderr': result.stderr
    }


def save_test_report(results, total_duration):
    """Save detailed test report to file."""
    report_dir = "test_reports"
    os.makedirs(report_dir, exist_ok=True)
    report_file = os.path.join(report_dir, f"test_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.txt")

    with open(report_file, 'w', encoding='utf-8') as f:
        f.write("Balance Sheet Pro - Test Report\n")
        f.write("=" * 50 + "\n")
        f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
        f.write(f"Total Duration: {total_duration:.2f}s\n\n")
        for result in results:
            f.write(f"{result['name']}: {result['status']} ({result['duration']:.2f}s)\n")
            if result.get('stdout'):
                f.write(result['stdout'] + "\n")
            if result.get('stderr'):
                f.write(result['stderr'] + "\n")
            f.write("-" * 30 + "\n")

    print(f"\n📄 Detailed report saved: {report_file}")


def main():
    """Run every suite and print the summary."""
    print("📑 Balance Sheet Pro - Test Suite")
    print("=" * 60)
    print(f"📅 Test Run Date: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"🐍 Python Version: {sys.version.split()[0]}")
    print("=" * 60)

    results = []
    total_start_time = time.time()
    for i, (name, path, description) in enumerate(TEST_SUITES, 1):
        print(f"\n📋 Suite {i}/{len(TEST_SUITES)}: {name}")
        print(f"📄 {description}")
        results.append(run_suite(name, path))
    total_duration = time.time() - total_start_time

    print("\n" + "=" * 60)
    print("📊 TEST SUMMARY REPORT")
    print("=" * 60)
    passed_count = len([r for r in results if r['status'] == 'PASSED'])
    for result in results:
        icon = STATUS_ICONS.get(result['status'], '❓')
        print(f"  {icon} {result['name']}: {result['status']} ({result['duration']:.2f}s)")
    print(f"\n✅ Passed: {passed_count}/{len(results)}  ⏱️  {total_duration:.2f}s")

    save_test_report(results, total_duration)
    return passed_count == len(results)


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
