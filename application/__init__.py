"""
Application Layer for the DreamShape workout tracker.

This package contains:
- ports/: Abstract interfaces (local store, Supabase repositories, auth)
- state.py: The single TrackerState holder
- local_persistence.py: Typed access to the local key-value store
- remote_pusher.py: Fire-and-forget remote writes
- timers.py: Rest countdown and session tickers
- use_cases/: Services coordinating state, store and remote
- tracker.py: The WorkoutTracker controller wiring it all together
"""
