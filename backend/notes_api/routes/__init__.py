# Routes package init
"""
Notes API — API Routes Package
===============================

Route Inventory:
    - root.py:    GET  /                     (plain-text greeting)
    - notes.py:   GET  /notes                (list notes)
                  GET  /notes/{id}           (single note)
                  POST /notes                (create)
                  PUT  /notes/{id}           (partial update)
                  DELETE /notes/{id}         (delete)
    - health.py:  GET  /health               (liveness probe)

Routes stay THIN: they check request fields, call the NoteStore and wrap
the result in a status envelope. Failures are raised as NotesError
subclasses and rendered by the handlers registered in main.py.
"""
