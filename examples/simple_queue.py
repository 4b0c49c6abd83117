"""Single-server M/M/1 queue built on the eventsim core.

Customers arrive as a Poisson process, the first one at time 0, and are served
one at a time with exponential service times. The server records:

- "Queue Length" (time-weighted): customers waiting, excluding the one in service
- "Server Utilization" (time-weighted): 1 while busy, 0 while idle
- "Waiting Time" (event-based): time from arrival to start of service
- "Service Time" (event-based): drawn service duration of each started service

## M/M/1 Queue Theory

With arrival rate lambda and service rate mu, utilization rho = lambda/mu.
For rho < 1:

    E[Lq] = rho^2 / (1 - rho)      (mean queue length)
    E[Wq] = rho / (mu - lambda)    (mean waiting time)
    E[S]  = 1 / mu                 (mean service time)

At the defaults (lambda = 0.8, mu = 1.0): rho = 0.8, E[Lq] = 3.2, E[Wq] = 4.0.

## Replications

``run_replications`` repeats the run with seeds ``seed + i * 100``. Waiting
and service times are pooled across runs, and each run's time-weighted
averages become one observation, so the report carries a 95% confidence
interval across replications.

Each random stream has its own seeded generator so that arrival and service
draws can be held fixed across experiments (common random numbers).
"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

from eventsim import Event, EventStats, RunSummary, Simulator, StatsCollector


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class QueueConfig:
    """Parameters and random streams for one M/M/1 run."""

    sim_time: float = 10000.0
    arrival_rate: float = 0.8
    service_rate: float = 1.0
    seed: int = 42
    arrival_rng: random.Random = field(init=False, repr=False)
    service_rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.arrival_rng = random.Random(self.seed)
        self.service_rng = random.Random(self.seed + 11)

    def next_interarrival_time(self) -> float:
        return self.arrival_rng.expovariate(self.arrival_rate)

    def next_service_time(self) -> float:
        return self.service_rng.expovariate(self.service_rate)

    @property
    def traffic_intensity(self) -> float:
        return self.arrival_rate / self.service_rate


# =============================================================================
# Model
# =============================================================================


@dataclass
class Customer:
    arrival_time: float

    def waiting_time(self, now: float) -> float:
        return now - self.arrival_time


class Server:
    """FIFO single server that owns its statistics and arrival counters."""

    def __init__(self, sim: Simulator, config: QueueConfig):
        self._sim = sim
        self._config = config
        self._queue: deque[Customer] = deque()
        self.busy = False
        self.customers_arrived = 0
        self.customers_served = 0

        self.stats = StatsCollector()
        self.stats.add_time_weighted("Queue Length", 0.0, 0.0)
        self.stats.add_time_weighted("Server Utilization", 0.0, 0.0)

    @property
    def queue_length(self) -> int:
        return len(self._queue)

    def handle_arrival(self, customer: Customer) -> None:
        now = self._sim.now()
        self.customers_arrived += 1

        if self.busy:
            self._queue.append(customer)
            self.stats.add_time_weighted("Queue Length", now, len(self._queue))
            return

        self.busy = True
        self.stats.add_time_weighted("Server Utilization", now, 1.0)
        self.stats.add_event("Waiting Time", 0.0)
        self._start_service()

    def handle_service_completion(self) -> None:
        now = self._sim.now()
        self.customers_served += 1

        if not self._queue:
            self.busy = False
            self.stats.add_time_weighted("Server Utilization", now, 0.0)
            return

        customer = self._queue.popleft()
        self.stats.add_time_weighted("Queue Length", now, len(self._queue))
        self.stats.add_event("Waiting Time", customer.waiting_time(now))
        self._start_service()

    def _start_service(self) -> None:
        service_time = self._config.next_service_time()
        self.stats.add_event("Service Time", service_time)
        self._sim.schedule(DepartureEvent(service_time, self))


class ArrivalEvent(Event):
    """Customer arrival. Schedules the next arrival, then hands off to the server."""

    def __init__(self, delay: float, server: Server, config: QueueConfig):
        super().__init__(delay)
        self._server = server
        self._config = config

    def action(self, sim: Simulator) -> None:
        sim.schedule(ArrivalEvent(self._config.next_interarrival_time(), self._server, self._config))
        self._server.handle_arrival(Customer(arrival_time=sim.now()))

    def label(self) -> str:
        return "Arrival"


class DepartureEvent(Event):
    def __init__(self, delay: float, server: Server):
        super().__init__(delay)
        self._server = server

    def action(self, sim: Simulator) -> None:
        self._server.handle_service_completion()

    def label(self) -> str:
        return "Departure"


# =============================================================================
# Main Simulation
# =============================================================================


@dataclass
class SimpleQueueResult:
    config: QueueConfig
    server: Server
    end_time: float
    summary: RunSummary

    @property
    def stats(self) -> StatsCollector:
        return self.server.stats

    @property
    def customers_arrived(self) -> int:
        return self.server.customers_arrived


def run_simple_queue(config: QueueConfig | None = None, *, log_events: bool = False) -> SimpleQueueResult:
    """Run the M/M/1 model until ``config.sim_time``."""
    config = config or QueueConfig()
    sim = Simulator(log_events=log_events)
    server = Server(sim, config)

    sim.schedule(ArrivalEvent(0.0, server, config))
    summary = sim.run(until=config.sim_time)

    return SimpleQueueResult(
        config=config,
        server=server,
        end_time=sim.now(),
        summary=summary,
    )


@dataclass
class ReplicationResult:
    """Statistics aggregated over independent replications."""

    config: QueueConfig
    runs: list[SimpleQueueResult]
    waiting_time: EventStats
    service_time: EventStats
    avg_queue_length: EventStats
    avg_utilization: EventStats

    def report(self) -> str:
        return "\n\n".join([
            self.waiting_time.report(),
            self.service_time.report(),
            self.avg_queue_length.report(),
            self.avg_utilization.report(),
        ])


def run_replications(config: QueueConfig | None = None, n: int = 100) -> ReplicationResult:
    """Run ``n`` replications seeded ``config.seed + i * 100`` and aggregate them."""
    config = config or QueueConfig()
    result = ReplicationResult(
        config=config,
        runs=[],
        waiting_time=EventStats("Waiting Time (All Replications)"),
        service_time=EventStats("Service Time (All Replications)"),
        avg_queue_length=EventStats("Average Queue Length per Replication"),
        avg_utilization=EventStats("Average Utilization per Replication"),
    )

    for i in range(n):
        run = run_simple_queue(QueueConfig(
            sim_time=config.sim_time,
            arrival_rate=config.arrival_rate,
            service_rate=config.service_rate,
            seed=config.seed + i * 100,
        ))
        result.runs.append(run)

        for value in run.stats.get_event("Waiting Time").observations:
            result.waiting_time.add(value)
        for value in run.stats.get_event("Service Time").observations:
            result.service_time.add(value)
        result.avg_queue_length.add(run.stats.get_time_weighted("Queue Length").average(config.sim_time))
        result.avg_utilization.add(run.stats.get_time_weighted("Server Utilization").average(config.sim_time))

    return result


def print_theory(config: QueueConfig) -> None:
    rho = config.traffic_intensity
    if rho >= 1:
        print("  System is unstable (rho >= 1); theoretical values not applicable.")
        return
    print(f"  Theoretical E[Lq]: {rho * rho / (1 - rho):.4f}")
    print(f"  Theoretical E[Wq]: {rho / (config.service_rate - config.arrival_rate):.4f}")
    print(f"  Theoretical rho:   {rho:.4f}")


def print_summary(result: SimpleQueueResult) -> None:
    config = result.config

    print("=" * 70)
    print("M/M/1 QUEUE")
    print("=" * 70)
    print(f"  lambda={config.arrival_rate}  mu={config.service_rate}  rho={config.traffic_intensity:.3f}")
    print(f"  Customers arrived: {result.customers_arrived}")
    print(f"  Customers served:  {result.server.customers_served}")
    print_theory(config)
    print()
    print(result.stats.report(end_time=result.end_time))
    print()
    print(result.summary)


def print_replication_summary(result: ReplicationResult) -> None:
    print("=" * 70)
    print(f"M/M/1 QUEUE: {len(result.runs)} REPLICATIONS")
    print("=" * 70)
    print(result.report())
    print()
    print_theory(result.config)


def visualize_results(result: SimpleQueueResult, output_dir: Path) -> None:
    """Histogram of waiting times."""
    import matplotlib.pyplot as plt

    output_dir.mkdir(parents=True, exist_ok=True)

    waits = result.stats.get_event("Waiting Time")
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.hist(waits.observations if waits else [], bins=50, color="steelblue", alpha=0.8)
    ax.axvline(waits.mean() if waits else 0.0, color="red", linestyle="--", label="Mean")
    ax.set_xlabel("Waiting time")
    ax.set_ylabel("Customers")
    ax.set_title("M/M/1 Waiting Time Distribution")
    ax.legend()
    fig.tight_layout()
    fig.savefig(output_dir / "waiting_time_hist.png", dpi=120)
    plt.close(fig)


if __name__ == "__main__":
    import argparse

    import eventsim

    parser = argparse.ArgumentParser(description="M/M/1 queue simulation")
    parser.add_argument("--sim-time", type=float, default=10000.0, help="Simulated time horizon")
    parser.add_argument("--arrival-rate", type=float, default=0.8, help="Arrival rate (lambda)")
    parser.add_argument("--service-rate", type=float, default=1.0, help="Service rate (mu)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--replications", type=int, default=100, help="Replications to aggregate (0 to skip)")
    parser.add_argument("--log-events", action="store_true", help="Log every executed event")
    parser.add_argument("--output", type=str, default="output/simple_queue", help="Output directory")
    parser.add_argument("--no-viz", action="store_true", help="Skip visualization generation")
    args = parser.parse_args()

    config = QueueConfig(
        sim_time=args.sim_time,
        arrival_rate=args.arrival_rate,
        service_rate=args.service_rate,
        seed=args.seed,
    )

    if args.replications > 0:
        print(f"Running {args.replications} replications...")
        print_replication_summary(run_replications(config, n=args.replications))
        print()

    if args.log_events:
        eventsim.enable_console_logging(level="INFO")

    result = run_simple_queue(config, log_events=args.log_events)
    print_summary(result)

    if not args.no_viz:
        output_dir = Path(args.output)
        visualize_results(result, output_dir)
        print(f"\nVisualizations saved to: {output_dir.absolute()}")
