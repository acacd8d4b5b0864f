import simpy

class MessageBroker:
    """
    Carries host reports (car positions, stops, hall button presses) to
    observers such as Statistics.

    Every message goes to the broadcast pipe. Topic pipes exist only for
    topics someone subscribed to, so unread topics do not pile up.
    """
    def __init__(self, env: simpy.Environment, verbose: bool = False):
        """
        Args:
            env (simpy.Environment): SimPy environment
            verbose (bool): Print every published message
        """
        self.env = env
        self.verbose = verbose
        self.topics = {}  # topic -> simpy.Store, created on subscribe
        self.broadcast_pipe = simpy.Store(self.env)

    def subscribe(self, topic: str) -> simpy.Store:
        """
        Pipe receiving every later message published on the topic
        """
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def put(self, topic: str, message):
        """
        Publish a message to the broadcast pipe and to the topic's subscribers
        """
        if self.verbose:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        self.broadcast_pipe.put({'topic': topic, 'message': message})
        if topic in self.topics:
            self.topics[topic].put(message)

    def get(self, topic: str):
        """
        Wait to receive a message from the specified topic
        """
        return self.subscribe(topic).get()

    def get_broadcast_pipe(self) -> simpy.Store:
        """
        Global pipe that receives a copy of every published message
        """
        return self.broadcast_pipe
