#!/usr/bin/env python3
import sys

print("Running preflight import check...")
try:
    import harness.main
    print("Import harness.main: OK")

    import harness.runner.orchestrator
    print("Import harness.runner.orchestrator: OK")

    import harness.cli
    print("Import harness.cli: OK")

    print("Preflight check passed.")
    sys.exit(0)
except Exception as e:
    print(f"Preflight check FAILED: {e}")
    import traceback
    traceback.print_exc()
    sys.exit(1)
