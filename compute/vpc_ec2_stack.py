from typing import Optional

from aws_cdk import CfnOutput, Stack, aws_ec2 as ec2
from constructs import Construct

from common import constants
from common.stack_context import build_name_tag


class VpcEc2Stack(Stack):

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        public_key: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)
        self.name_tag = build_name_tag(constants.TRADING_HUB_NAME)

        self.vpc = ec2.CfnVPC(
            self,
            "vpc",
            cidr_block=constants.VPC_CIDR,
            tags=self.name_tag,
        )
        self.subnet = ec2.CfnSubnet(
            self,
            "subnet",
            vpc_id=self.vpc.ref,
            cidr_block=constants.TRADING_HUB_SUBNET_CIDR,
            availability_zone=constants.TRADING_HUB_AZ,
            tags=self.name_tag,
        )
        self.network_interface = ec2.CfnNetworkInterface(
            self,
            "ec2-network-interface",
            subnet_id=self.subnet.ref,
            private_ip_address=constants.TRADING_HUB_PRIVATE_IP,
            tags=self.name_tag,
        )
        self.key_pair = self.create_key_pair(public_key) if public_key else None
        self.instance = self.create_instance()

        CfnOutput(self, "private_ip", value=self.instance.attr_private_ip)

    def create_key_pair(self, public_key: str) -> ec2.CfnKeyPair:
        """Import a locally held public key so the instance accepts SSH logins."""
        return ec2.CfnKeyPair(
            self,
            "key-pair",
            key_name=constants.TRADING_HUB_KEY_NAME,
            public_key_material=public_key,
            tags=self.name_tag,
        )

    def create_instance(self) -> ec2.CfnInstance:
        # Public parameter tracking the most recent amzn2-ami-hvm-*-x86_64-gp2 image
        amazon_linux = ec2.MachineImage.from_ssm_parameter(
            constants.TRADING_HUB_AMI_PARAMETER
        )
        return ec2.CfnInstance(
            self,
            "compute",
            image_id=amazon_linux.get_image(self).image_id,
            instance_type=constants.TRADING_HUB_INSTANCE_TYPE,
            key_name=self.key_pair.ref if self.key_pair else None,
            network_interfaces=[
                ec2.CfnInstance.NetworkInterfaceProperty(
                    device_index="0",
                    network_interface_id=self.network_interface.ref,
                )
            ],
            tags=self.name_tag,
        )
