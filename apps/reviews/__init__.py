"""Reviews app package.

Owners and hosts review each other once a booking is completed. The
eligibility gate in ``services`` decides who may review what.
"""
