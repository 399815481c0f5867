"""
The derivative cache is a dictionary of variable index -> chain, where each
chain is a list of (polynomial, version) pairs: the polynomial itself followed
by its successive derivatives with respect to that variable.

If the owning polynomial was modified after its chain was built then the chain
is discarded and rebuilt. If one of the derivatives that was handed out to a
caller was modified, then the chain is truncated at that derivative and the
missing entries are recomputed.
"""

class DerivativeCache:
    def __init__(self, owner, verbose=False):
        self.owner      = owner
        self.verbose    = bool(verbose)
        self._chains    = {}

    def __len__(self):
        return len(self._chains)

    def size(self, var):
        """ Number of cached entries for this variable, including the polynomial itself. """
        return len(self._chains.get(var, ()))

    def chains(self):
        return {var: [poly for poly, version in chain] for var, chain in self._chains.items()}

    def invalidate(self, var=None):
        if var is None:
            self._chains.clear()
        else:
            self._chains.pop(var, None)

    def get(self, order, var):
        order = int(order)
        if order < 0:
            raise ValueError(f'derivative order must be non-negative, got {order}')
        chain = self._chains.get(var)
        if chain is None or not _is_current(chain[0]):
            if self.verbose:
                reason = 'building' if chain is None else 'rebuilding stale'
                print(f'Derivative cache: {reason} chain for variable {var}')
            chain = [(self.owner, self.owner.version)]
            self._chains[var] = chain
        else:
            for depth, entry in enumerate(chain):
                if not _is_current(entry):
                    if self.verbose: print(f'Derivative cache: order {depth} was modified, truncating')
                    del chain[depth:]
                    break
        if self.verbose and len(chain) > order:
            print(f'Derivative cache: hit for order {order} of variable {var}')
        while len(chain) < order + 1:
            derivative = chain[-1][0].monomial_derivative(var)
            chain.append((derivative, derivative.version))
            if self.verbose: print(f'Derivative cache: computed order {len(chain) - 1} of variable {var}')
        return chain[order][0]

def _is_current(entry):
    polynomial, version = entry
    return polynomial.version == version
