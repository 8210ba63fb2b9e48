import numpy as np

from tlp import init, TrainingSession
from tlp import initializer, schedule
from tlp.core.session import setup_logging
from tlp.data import sampling, target_functions
from tlp.visualize import show_results


random_state = np.random.RandomState(1234)

setup_logging()


# Training conditions #########################################################

target_function = target_functions.get('sin_pi_x')
hidden_units = 4
eta = 0.1

# Learn from randomly sampled inputs instead of a fixed, evenly spaced set
random_sampling = False

n_sequential = 50
n_epochs = 1000

n_random = 5000
random_error_period = 128

# Set up the network and train it #############################################

network = init(
    hidden_units=hidden_units,
    learning_rate=schedule.constant(eta),
    weight_init=initializer.uniform(random_state=random_state),
)

session = TrainingSession(network)

if random_sampling:
    session.train_random(
        target_function, n_random, x_min=-1, x_max=1,
        error_period=random_error_period, random_state=random_state)
    n_points = random_error_period
else:
    training_set = sampling.sequential(
        target_function, n_sequential, x_min=-1, x_max=1)
    session.train_sequential(training_set, epochs=n_epochs)
    n_points = n_sequential

# Display results #############################################################

show_results(session, n_points=n_points, show_hidden=True)
