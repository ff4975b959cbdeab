class ServiceError(Exception):
    pass


class InvalidFineError(ServiceError):
    pass


class InvalidPayoutError(ServiceError):
    pass


class InsufficientTrackAllowanceError(ServiceError):
    def __init__(self, remaining, requested):
        super().__init__(
            'Insufficient track allowance. You have %s tracks remaining but need %s.'
            % (remaining, requested)
        )
        self.remaining = remaining
        self.requested = requested


class InvalidTrackAllowanceError(ServiceError):
    pass


class NoStripeCustomerError(ServiceError):
    pass
