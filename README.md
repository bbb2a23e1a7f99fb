# bitforge

bitforge is a minimal engine core. It runs a main loop that ticks a set of
subsystems once per frame and paces each frame to a minimum duration.

## Running

Install the package and start the engine loop:

    pip install .
    bitforge

The command takes no options apart from `--help`. It logs the engine version,
creates the timer and renderer subsystems, and runs frames until a subsystem
asks to exit. The built-in renderer subsystem asks to exit on its first tick, so
a run is a single frame at present. The subsystems are then shut down, last
created first, the log is flushed, and the command exits with the code that was
given with the exit request (0 for the renderer).

Log lines go to standard output in the form
`[time] [LEVEL   ] message`, at DEBUG level and above.

## Library use

- `bitforge.instance.BitforgeInstance` owns the subsystems and the frame timer
  (a minimum frame time of 16.6666 ms). Call `tick()` once per frame until
  `is_exit_requested()` is true; the code given to `exit_request(exit_code)` is
  then available from `exit_code()`. `subsystems` lists the subsystems in
  creation order, `timer` is the frame timer, and `shutdown()` shuts the
  subsystems down in reverse order. Each tick calls `tick(delta_time_ns)` on
  every subsystem whose `should_tick()` is true, passing the length of the
  previous frame in nanoseconds.
- `bitforge.instance.VERSION_STRING` holds the engine version, `"1.0.0"`.
- `bitforge.subsystem.Subsystem` is the abstract base class for subsystems. It
  takes a non-empty name and the engine instance; an empty name raises
  `ValueError`. Override `should_tick()` and, if needed,
  `tick(delta_time_ns)`. `shutdown()` logs that the subsystem has stopped.
- `bitforge.timer.TimerSubsystem` marks the start (`mark_start_work()`) and end
  (`mark_end_work()`) of each frame's work. At the end it sleeps until at least
  the minimum frame time, set in milliseconds with `set_minimum_frame_time()`,
  has passed since the start; a minimum of 0 means no waiting.
  `latest_frame_delta_time_ns()` gives the duration of the last finished frame.
  Its `clock` (nanoseconds) and `sleep` (seconds) attributes can be replaced to
  drive it from another time source. It never asks to be ticked.
- `bitforge.renderer.RendererSubsystem` is the renderer's place in the frame;
  its `tick()` requests an exit with code 0.
- `bitforge.thread.Thread` is an abstract named worker. Subclass it and
  implement `main()` to return an exit code, then call `start()` and `join()`.
  `join()` returns the exit code of `main()`, re-raises any exception `main()`
  raised, and raises `RuntimeError` if the thread was never started. Starting a
  thread twice also raises `RuntimeError`.
- `bitforge.vector.BoundedVector` is a sequence with an explicit capacity that
  doubles as it fills, up to an optional hard limit (`capacity_limit_max`, 0 for
  none). An initial capacity above the limit is clamped to it. Appending past
  the limit raises `bitforge.vector.CapacityError`; negative capacities raise
  `ValueError`. It supports `len()`, iteration and indexing.
- `bitforge.ownership.Owner` holds at most one object, with `get()`,
  `acquire(obj)`, `release()` and `clean()`; it is true while it holds an
  object.
- `bitforge.logger.get_logger()` returns the shared engine logger, and
  `flush_logs()` flushes its handlers.

## What it does not do

The renderer subsystem draws nothing: there is no window, graphics output or
input handling. There is no frame profiling or tracing output beyond the log.

## Tests

    pip install .[test]
    pytest