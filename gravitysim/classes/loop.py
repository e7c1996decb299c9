# classes/loop.py

import threading
import time

# Returned by a pointer callable once the pointer has left the window
POINTER_LEFT = object()


class ComputationLoop(threading.Thread):
    """Dedicated thread that advances the simulation and publishes each finished frame.

    `pointer` is an optional callable returning the attractor position for the
    next frame, None to leave it where it is, or POINTER_LEFT to send the
    attractor back to its home position. `spawn_requests` is an
    optional callable returning a list of (pattern, pointer) pairs collected by
    the host since the previous frame.
    """

    def __init__(self, simulation, buffer, pointer=None, spawn_requests=None,
                 target_fps=None, max_frames=None):
        super().__init__(name=f"{simulation.config.variant}-loop", daemon=True)
        self.simulation = simulation
        self.buffer = buffer
        self.pointer = pointer
        self.spawn_requests = spawn_requests
        self.target_fps = target_fps
        self.max_frames = max_frames
        self.stop_event = threading.Event()
        self.frames = 0

    def stop(self):
        self.stop_event.set()

    def run(self):
        frame_time = 1.0 / self.target_fps if self.target_fps else 0.0
        while not self.stop_event.is_set():
            start = time.perf_counter()

            if self.spawn_requests is not None:
                for pattern, pointer in self.spawn_requests():
                    self.simulation.request_spawn(pattern, pointer)

            position = self.pointer() if self.pointer is not None else None
            if position is POINTER_LEFT:
                self.simulation.attractor.park()
                position = None
            snapshot = self.simulation.advance_frame(position)
            self.buffer.publish(snapshot)
            self.frames += 1

            if self.max_frames is not None and self.frames >= self.max_frames:
                break

            if frame_time:
                remaining = frame_time - (time.perf_counter() - start)
                if remaining > 0:
                    self.stop_event.wait(remaining)
