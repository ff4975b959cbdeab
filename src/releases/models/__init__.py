from .release import Release, ReleaseStatusChange
