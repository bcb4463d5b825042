"""SynergySphere collaboration API package.

Projects, members, tasks and messages for small teams, with per-user
notifications and a per-project activity feed raised as side effects of
those domain actions.
"""
