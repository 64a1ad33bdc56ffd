from dataclasses import asdict,fields,is_dataclass

class GoogleWorkSpaceResourceBase():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    Subclasses call fixup() from __post_init__ to normalize fields.
    """
    def to_base(self) -> dict:
        """
        Default just return the dict representation of the object as needed by
        the GWS client.  Something more complicated can override.
        Call fixup() first to ensure all fields are in correct format.
        """
        self.fixup()
        return asdict(self)

    def trim(self) -> dict:
        """
        Return a 'trimmed' dict of the resource.  That is, removing any top level attributes
        that are empty or None.  Numbers and bools are kept even when falsy as 0 or False
        can be a valid value.  Request bodies only want the filled-in fields.
        """
        b = self.to_base()
        for k,v in list(b.items()):
            if v is None or (type(v) not in [int,bool,float] and not v):
                del b[k]
        return b

    def fixup(self) -> None:
        """
        notify a subclass to do any field adjustments
        """
        pass

    @classmethod
    def from_response(cls, response: dict|None):
        """
        Build the resource from a raw response dict, ignoring any keys
        the dataclass doesn't know about (the API adds fields over time).
        An empty or missing response gives the default instance.
        """
        if not response:
            return cls()
        names = [f.name for f in fields(cls)] if is_dataclass(cls) else []
        return cls(**{k: v for k,v in dict(response).items() if k in names})

