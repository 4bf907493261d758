"""Orchestrator for diagnostics collection.

Fans out every configured probe concurrently, waits for all of them,
then hands back results in configuration order.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import datetime

import config
from commands import probe_command
from counter import CompletionCounter
from enums import ProbeKind
from host_info import get_host_identity
from logging_config import get_logger
from models import CollectionPlan, DiagnosticsData, ProbeResults, ProbeTarget, ResultSlots
from network import get_interface_addresses, probe_outbound_route, probe_public_ip
from progress import ProgressCallback, ProgressReporter
from utils import sanitize_for_log

logger = get_logger(__name__)


def collect_probe_results(
    plan: CollectionPlan,
    counter: CompletionCounter | None = None,
    on_progress: ProgressCallback | None = None,
    timeout: float = config.TIMEOUT_SECONDS,
    command_timeout: float = config.COMMAND_TIMEOUT_SECONDS,
    cancel_event: threading.Event | None = None,
) -> ProbeResults:
    """Run all probes of the plan concurrently.

    Process:
        1. Pre-size one result array per probe kind
        2. Start progress reporter (if a callback is given)
        3. Submit one task per probe target
        4. Join barrier: wait for every submitted task
        5. Read results in configuration order

    Args:
        plan: Probe inputs for this run
        counter: Completion counter (new one if None)
        on_progress: Receives fractions in [0, 1] while probes run
        timeout: Network timeout per probe in seconds
        command_timeout: Command timeout per probe in seconds
        cancel_event: When set, tasks that have not started yet skip
            their probe and store ""

    Returns:
        ProbeResults in configuration order.

    Raises:
        KeyboardInterrupt: After cancelling remaining tasks and waiting
            for running ones.
    """
    if counter is None:
        counter = CompletionCounter()
    if cancel_event is None:
        cancel_event = threading.Event()

    slots = {
        ProbeKind.OUTBOUND_ROUTE: ResultSlots(len(plan.outbound_targets)),
        ProbeKind.PUBLIC_IP: ResultSlots(len(plan.public_sites)),
        ProbeKind.COMMAND: ResultSlots(len(plan.commands)),
    }
    targets = plan.targets()
    logger.info("Dispatching %d probes", len(targets))

    reporter = None
    if on_progress is not None:
        reporter = ProgressReporter(counter, plan.total, on_progress)
        reporter.start()

    try:
        with ThreadPoolExecutor(
            max_workers=max(len(targets), 1),
            thread_name_prefix="probe",
        ) as executor:
            futures: list[Future[None]] = [
                executor.submit(
                    _run_target, target, slots, counter, timeout, command_timeout, cancel_event
                )
                for target in targets
            ]
            try:
                wait(futures)
            except KeyboardInterrupt:
                logger.warning("Interrupted, waiting for running probes to finish")
                cancel_event.set()
                raise

        # Re-raise anything a task did not handle itself
        for future in futures:
            future.result()
    finally:
        if reporter is not None:
            if counter.snapshot() < plan.total:
                reporter.stop()
            reporter.join()

    logger.info("All %d probes finished", counter.snapshot())

    return ProbeResults(
        routes=slots[ProbeKind.OUTBOUND_ROUTE].values(),
        public_ips=slots[ProbeKind.PUBLIC_IP].values(),
        command_outputs=slots[ProbeKind.COMMAND].values(),
    )


def _run_target(
    target: ProbeTarget,
    slots: dict[ProbeKind, ResultSlots],
    counter: CompletionCounter,
    timeout: float,
    command_timeout: float,
    cancel_event: threading.Event,
) -> None:
    """Run one probe and store its result in the pre-assigned slot."""
    if cancel_event.is_set():
        logger.debug("Skipping cancelled probe: %s", sanitize_for_log(target.value))
        counter.increment()
        slots[target.kind].store(target.slot, "")
        return

    if target.kind == ProbeKind.OUTBOUND_ROUTE:
        result = probe_outbound_route(target.value, counter, timeout=timeout)
    elif target.kind == ProbeKind.PUBLIC_IP:
        result = probe_public_ip(target.value, counter, timeout=timeout)
    else:
        result = probe_command(target.value, counter, timeout=command_timeout)

    slots[target.kind].store(target.slot, result)


def collect_diagnostics(
    plan: CollectionPlan,
    on_progress: ProgressCallback | None = None,
    timeout: float = config.TIMEOUT_SECONDS,
    command_timeout: float = config.COMMAND_TIMEOUT_SECONDS,
    cancel_event: threading.Event | None = None,
) -> DiagnosticsData:
    """Collect complete diagnostics for this host.

    Process:
        1. Record local timestamp
        2. Host identity and interface addresses (synchronous)
        3. Concurrent probes (see collect_probe_results)

    Returns:
        DiagnosticsData ready for report assembly or export.
    """
    generated_at = datetime.now().astimezone()

    logger.debug("Reading host identity...")
    host = get_host_identity()

    logger.debug("Enumerating interface addresses...")
    addresses = get_interface_addresses()

    results = collect_probe_results(
        plan,
        on_progress=on_progress,
        timeout=timeout,
        command_timeout=command_timeout,
        cancel_event=cancel_event,
    )

    return DiagnosticsData(
        generated_at=generated_at,
        host=host,
        interface_addresses=addresses,
        plan=plan,
        results=results,
    )
