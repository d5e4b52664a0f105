"""
Locust Load Test Suite

Run scenarios:
  locust -f locustfile.py --tags throughput   # Read throughput
  locust -f locustfile.py --tags edge         # Test bad input
  locust -f locustfile.py                     # All tests
"""

import random
from locust import HttpUser, task, between, tag

# Learned from /api/v1/rings/ responses
KNOWN_RINGS = []

HALL_RANGE = (1, 5)
RING_RANGE = (1, 10)


class ThroughputUser(HttpUser):
    """
    TEST 1: Throughput - provider read path

    Run twice:
      1. RING_PROVIDER=memory: locust -f locustfile.py --tags throughput -u 100 -r 20 --run-time 60s
      2. RING_PROVIDER=redis: run again

    Compare:
      - Avg response time
      - Requests/sec
      - P95/P99 latency
    """
    wait_time = between(0.1, 0.5)

    @tag("throughput", "read")
    @task(10)
    def next_ring(self):
        """404 is a valid answer when every ring is occupied."""
        with self.client.get("/api/v1/rings/next", catch_response=True) as resp:
            if resp.status_code in [200, 404]:
                resp.success()
            else:
                resp.failure(f"Unexpected: {resp.status_code}")

    @tag("throughput", "read")
    @task(5)
    def all_rings(self):
        resp = self.client.get("/api/v1/rings/")
        if resp.status_code == 200:
            for ring in resp.json():
                key = (ring["HallNumber"], ring["Number"])
                if key not in KNOWN_RINGS:
                    KNOWN_RINGS.append(key)

    @tag("throughput", "read")
    @task(10)
    def ring_availability(self):
        if KNOWN_RINGS:
            hall, ring = random.choice(KNOWN_RINGS)
        else:
            hall, ring = random.randint(*HALL_RANGE), random.randint(*RING_RANGE)
        with self.client.get(f"/api/v1/rings/{hall}/{ring}/availability",
            name="/api/v1/rings/{hall}/{ring}/availability",
            catch_response=True
        ) as resp:
            if resp.status_code in [200, 423]:
                resp.success()
            else:
                resp.failure(f"Unexpected: {resp.status_code}")

    @tag("throughput")
    @task(1)
    def health_check(self):
        """Monitor system health."""
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 2: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    @tag("edge")
    @task
    def unknown_ring(self):
        """Rings outside the layout are never available."""
        with self.client.get("/api/v1/rings/999999/999999/availability",
            name="/api/v1/rings/{hall}/{ring}/availability [unknown]",
            catch_response=True
        ) as resp:
            if resp.status_code == 423:
                resp.success()
            else:
                resp.failure(f"Expected 423, got {resp.status_code}")

    @tag("edge")
    @task
    def negative_numbers(self):
        with self.client.get("/api/v1/rings/-1/-5/availability",
            name="/api/v1/rings/{hall}/{ring}/availability [negative]",
            catch_response=True
        ) as resp:
            if resp.status_code == 423:
                resp.success()
            else:
                resp.failure(f"Expected 423, got {resp.status_code}")

    @tag("edge")
    @task
    def non_integer_numbers(self):
        with self.client.get("/api/v1/rings/abc/1/availability",
            name="/api/v1/rings/{hall}/{ring}/availability [invalid]",
            catch_response=True
        ) as resp:
            if resp.status_code == 422:
                resp.success()
            else:
                resp.failure(f"Expected 422, got {resp.status_code}")
